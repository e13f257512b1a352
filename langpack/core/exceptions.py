# langpack/core/exceptions.py

"""
Langpack domain-specific exceptions.

Library code raises these exceptions; the CLI commands catch them and
turn them into a single human-readable line plus a non-zero exit code.
"""

from typing import Optional


class LangPackError(Exception):
    """Base exception for all langpack errors."""
    pass

# ==============================================================
# CATALOG & SELECTION ERRORS
# ==============================================================

class CatalogError(LangPackError):
    """Raised when a component catalog is malformed."""
    def __init__(self, details: str):
        self.details = details
        super().__init__(f"Invalid component catalog: {details}")

class SelectionError(LangPackError):
    """Base exception for selection-related errors."""
    pass

class EmptySelectionError(SelectionError):
    """Raised when no component at all is selected."""
    def __init__(self):
        super().__init__("No language pack selected. Select at least one language to continue.")

class ImmutableComponentError(SelectionError):
    """Raised when a required component is toggled off."""
    def __init__(self, component_id: str):
        self.component_id = component_id
        super().__init__(f"Language pack '{component_id}' is required and cannot be deselected")

class UnknownComponentError(SelectionError):
    """Raised when a component id is not part of the catalog."""
    def __init__(self, component_id: str, available: Optional[list[str]] = None):
        self.component_id = component_id
        self.available = available
        if available:
            super().__init__(
                f"Unknown language pack '{component_id}'. "
                f"Available: {', '.join(available)}"
            )
        else:
            super().__init__(f"Unknown language pack '{component_id}'")

# ==============================================================
# PROVISIONING ERRORS
# ==============================================================

class ProvisioningError(LangPackError):
    """Base exception for failures of a provisioning run."""
    pass

class DownloadError(ProvisioningError):
    """Raised when fetching one artifact fails. Aborts the whole run."""
    def __init__(self, artifact_id: str, cause: str):
        self.artifact_id = artifact_id
        self.cause = cause
        super().__init__(f"Download failed for '{artifact_id}': {cause}")

class ExtractionError(ProvisioningError):
    """Raised when expanding one artifact fails. Already extracted files stay on disk."""
    def __init__(self, artifact_id: str, cause: str):
        self.artifact_id = artifact_id
        self.cause = cause
        super().__init__(f"Extraction failed for '{artifact_id}': {cause}")

class ManifestWriteError(ProvisioningError):
    """Raised when the installed-languages manifest cannot be written."""
    def __init__(self, path: str, cause: str):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not write language manifest {path}: {cause}")

class InvalidStateTransitionError(ProvisioningError):
    """Raised when a provisioning run is driven through an illegal state change."""
    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(f"Invalid provisioning state transition: {current} → {target}")

# ==============================================================
# ENVIRONMENT ERRORS
# ==============================================================

class ConfigError(LangPackError):
    """Raised when the global configuration file cannot be used."""
    def __init__(self, path: str, details: str):
        self.path = path
        self.details = details
        super().__init__(f"Invalid configuration in {path}: {details}")

class ReleaseLookupError(LangPackError):
    """Raised when the release version cannot be determined."""
    def __init__(self, details: str):
        self.details = details
        super().__init__(f"Release lookup failed: {details}")

class UnsupportedPlatformError(LangPackError):
    """Raised when no artifacts are published for the host platform."""
    def __init__(self, platform: str, supported: list[str]):
        self.platform = platform
        self.supported = supported
        super().__init__(
            f"Unsupported platform: {platform}. "
            f"Supported platforms: {', '.join(supported)}"
        )
