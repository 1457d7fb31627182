"""
Extension hooks consulted by the renderers.

An extension adds elements the core renderer does not know about, for example
a content module. It is either a callable or an object with a ``render``
method, called as ``render(descriptor, root, channel)`` with the resolved
descriptor, the document root and the channel element.
"""

from typing import Callable, Dict, Iterable, List, Tuple

from .logging_config import get_logger


logger = get_logger(__name__)

ExtensionHook = Callable[..., None]


class ExtensionRegistry:
    """Named extension hooks, kept in registration order."""

    def __init__(self):
        self._hooks: Dict[str, Tuple[ExtensionHook, Tuple[str, ...]]] = {}

    def register(self, name: str, extension, formats: Iterable[str] = ("rss",)) -> None:
        """
        Register an extension for one or more feed formats.

        Args:
            name: Unique extension name
            extension: Callable, or object with a ``render`` method
            formats: Feed formats the extension applies to
        """
        if name in self._hooks:
            raise ValueError(f"Extension '{name}' is already registered")
        hook = getattr(extension, "render", extension)
        if not callable(hook):
            raise TypeError(f"Extension '{name}' is not callable and has no render method")
        self._hooks[name] = (hook, tuple(fmt.lower() for fmt in formats))
        logger.debug("Registered extension %s for %s", name, ", ".join(self._hooks[name][1]))

    def unregister(self, name: str) -> None:
        if name not in self._hooks:
            raise KeyError(f"Extension '{name}' is not registered")
        del self._hooks[name]

    def get(self, name: str) -> ExtensionHook:
        return self._hooks[name][0]

    def names(self) -> List[str]:
        return list(self._hooks)

    def for_format(self, fmt: str) -> List[Tuple[str, ExtensionHook]]:
        """Extensions that apply to a feed format, in registration order."""
        fmt = fmt.lower()
        return [(name, hook) for name, (hook, formats) in self._hooks.items() if fmt in formats]

    def __contains__(self, name: str) -> bool:
        return name in self._hooks

    def __len__(self) -> int:
        return len(self._hooks)
