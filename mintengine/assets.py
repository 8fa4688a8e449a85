"""Loadable game assets and the manager that owns them."""

import enum
from abc import ABC, abstractmethod

import pygame

from mintengine.files import file_exists
from mintengine.log import core_logger

_FONT_PROBE_SIZE = 12


class AssetType(enum.Enum):
    """The kinds of asset the engine knows about."""

    TEXTURE_2D = enum.auto()
    SHADER = enum.auto()
    FONT = enum.auto()


def _require_file(name, what):
    if not file_exists(name):
        raise FileNotFoundError(f"Failed to load {what}: {name} - File not found")


def _ensure_font_module():
    if not pygame.font.get_init():
        pygame.font.init()


class Asset(ABC):
    """A resource read from disk, identified by the name it was loaded from."""

    type: AssetType

    def __init__(self):
        self.name = ""
        self.is_loaded = False

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, is_loaded={self.is_loaded!r})"

    @abstractmethod
    def load(self, name):
        """Load the asset from the file ``name``."""

    @abstractmethod
    def unload(self):
        """Mark the asset as no longer loaded."""


class Texture2D(Asset):
    """An image held as a pygame surface."""

    type = AssetType.TEXTURE_2D

    def __init__(self, surface=None):
        super().__init__()
        self.surface = surface

    def load(self, name):
        _require_file(name, "texture")
        try:
            surface = pygame.image.load(name)
        except (pygame.error, OSError) as exc:
            core_logger().error("Failed to load texture: %s (%s)", name, exc)
            return
        self.surface = surface
        self.name = name
        self.is_loaded = True

    def unload(self):
        self.is_loaded = False

    def size(self):
        """Return the texture's (width, height), or (0, 0) without an image."""
        if self.surface is None:
            return (0, 0)
        return self.surface.get_size()


class Shader(Asset):
    """Shader source text read from a file."""

    type = AssetType.SHADER

    def __init__(self):
        super().__init__()
        self.source = None

    def load(self, name):
        _require_file(name, "shader")
        try:
            with open(name, encoding="utf-8") as handle:
                source = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            core_logger().error("Failed to load shader: %s (%s)", name, exc)
            return
        self.source = source
        self.name = name
        self.is_loaded = True

    def unload(self):
        if not self.is_loaded:
            return
        self.is_loaded = False
        self.source = None


class Font(Asset):
    """A font file; sized faces are made from ``path`` when text is drawn."""

    type = AssetType.FONT

    def __init__(self):
        super().__init__()
        self.path = None

    def load(self, name):
        _require_file(name, "font")
        _ensure_font_module()
        try:
            pygame.font.Font(name, _FONT_PROBE_SIZE)
        except (pygame.error, OSError) as exc:
            core_logger().error("Failed to load font: %s (%s)", name, exc)
            return
        self.path = name
        self.name = name
        self.is_loaded = True

    def unload(self):
        self.is_loaded = False


def _check_kind(kind):
    if not (isinstance(kind, type) and issubclass(kind, Asset)):
        raise TypeError(f"{kind!r} must be a subclass of Asset")


class AssetsManager:
    """Loads, shares and releases assets, grouped by their class."""

    def __init__(self):
        self._assets = {}
        self._loaded = set()

    def load_asset(self, kind, name):
        """Return the asset of ``kind`` loaded from ``name``, loading it once."""
        _check_kind(kind)
        if self.is_asset_loaded(name):
            return self.get_asset(kind, name)
        asset = kind()
        asset.load(name)
        self._assets.setdefault(kind, []).append(asset)
        if asset.is_loaded:
            self._loaded.add(asset.name)
        return asset

    def unload_asset(self, asset):
        """Unload ``asset`` and forget it."""
        _check_kind(type(asset))
        asset.unload()
        assets = self._assets.get(type(asset), [])
        self._assets[type(asset)] = [stored for stored in assets if stored is not asset]
        self._loaded.discard(asset.name)

    def unload_all_assets(self):
        """Unload and forget every asset."""
        for assets in self._assets.values():
            for asset in assets:
                asset.unload()
            assets.clear()
        self._loaded.clear()

    def is_asset_loaded(self, name):
        """Return True if an asset loaded from ``name`` is held."""
        return name in self._loaded

    def get_asset(self, kind, name):
        """Return the held asset of ``kind`` named ``name``; KeyError if none."""
        _check_kind(kind)
        for asset in self._assets.get(kind, []):
            if asset.name == name:
                return asset
        core_logger().error("Asset not found: %s", name)
        raise KeyError(f"Asset not found: {name}")