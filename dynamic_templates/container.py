import logging
from typing import Any, Callable, TypeVar

from .config.settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Container:
    """Lazily built, shared instances keyed by interface."""

    def __init__(self):
        self._factories: dict[type, Callable[[], Any]] = {}
        self._instances: dict[type, Any] = {}

    def register(self, interface: type[T], factory: Callable[[], T]) -> None:
        """Register factory for interface, dropping any instance already built."""
        self._factories[interface] = factory
        self._instances.pop(interface, None)

    def resolve(self, interface: type[T]) -> T:
        if interface not in self._instances:
            if interface not in self._factories:
                raise KeyError(f"No factory registered for {interface}")
            self._instances[interface] = self._factories[interface]()
        return self._instances[interface]

    def reset(self) -> None:
        """Drop built instances so the next resolve rebuilds them."""
        self._instances.clear()


container = Container()


def configure_container(settings: Settings, target: Container = container) -> Container:
    """Configure container with all dependencies.

    Args:
        settings: Application settings.
        target: Container to register into.

    Returns:
        Configured container.
    """
    from .core.protocols.template_loader import TemplateLoaderProtocol
    from .core.services.template_service import TemplateService
    from .infrastructure.template_loaders import CompositeLoader

    target.register(TemplateLoaderProtocol, CompositeLoader)

    target.register(
        TemplateService,
        lambda: TemplateService.from_file(
            settings.templates_config_path,
            loader=target.resolve(TemplateLoaderProtocol),
            unknown_type=settings.unknown_dynamic_type,
        ),
    )

    logger.info("Container configured")
    return target
