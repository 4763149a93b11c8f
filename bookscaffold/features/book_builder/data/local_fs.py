import logging
from pathlib import Path
from ..domain.interfaces import IBookWriter

logger = logging.getLogger(__name__)

class LocalBookWriter(IBookWriter):
    def write_text(self, path: Path, content: str) -> Path:
        """
        Overwrites the file in full. Parent folders (e.g. _data/) are created
        on demand. newline="" keeps the output byte-identical across platforms.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        logger.debug(f"Wrote {len(content)} chars to {path}")
        return path
