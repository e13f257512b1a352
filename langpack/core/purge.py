# langpack/core/purge.py

import shutil
from pathlib import Path

from langpack.core.exceptions import ProvisioningError


def purge_installation(destination_dir: Path) -> bool:
    """
    Remove the provisioned directory tree.

    Returns False when there was nothing to remove.

    Raises:
        ProvisioningError: For unsafe targets (filesystem root, home dir) or removal failures
    """
    target = Path(destination_dir).expanduser()
    if not target.exists():
        return False

    resolved = target.resolve()
    if resolved == Path(resolved.anchor) or resolved == Path.home().resolve():
        raise ProvisioningError(f"Refusing to purge {resolved}")
    if not resolved.is_dir():
        raise ProvisioningError(f"Not a directory: {resolved}")

    try:
        shutil.rmtree(resolved)
    except OSError as e:
        raise ProvisioningError(f"Failed to purge {resolved}: {e}")
    return True
