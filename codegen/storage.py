import time
from pathlib import Path
from typing import Dict, Any, List
from loguru import logger

from common.dom import Document


class MapperStorage:
    """Manage generated mapper files on disk"""

    def __init__(self, base_dir: str = "generated"):
        self.base_dir = Path(base_dir)

    def get_output_path(self, target_package: str, mapper_name: str) -> Path:
        """Get the file path for a mapper, laid out by package"""
        package_dir = self.base_dir.joinpath(*[p for p in target_package.split('.') if p])
        return package_dir / f"{mapper_name}.xml"

    def exists(self, target_package: str, mapper_name: str) -> bool:
        return self.get_output_path(target_package, mapper_name).exists()

    def save_document(self, document: Document, output_path: Path):
        """Write a document to storage"""
        output_path.parent.mkdir(parents=True, exist_ok=True)

        # Atomic write using temporary file
        temp_path = output_path.with_suffix('.tmp')
        try:
            with open(temp_path, 'w', encoding='utf-8') as f:
                f.write(document.get_formatted_content())
            temp_path.replace(output_path)
        finally:
            if temp_path.exists():
                temp_path.unlink()
        logger.info(f"Saved mapper: {output_path}")

    def list_outputs(self) -> List[Dict[str, Any]]:
        """List all generated mapper files, most recently updated first"""
        if not self.base_dir.exists():
            return []

        outputs = []
        for path in self.base_dir.rglob("*.xml"):
            relative = path.relative_to(self.base_dir)
            stat = path.stat()
            outputs.append({
                "package": ".".join(relative.parent.parts),
                "mapper_name": path.stem,
                "path": str(path),
                "size": stat.st_size,
                "mtime": stat.st_mtime,
                "updated_at": time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(stat.st_mtime)),
            })

        outputs.sort(key=lambda x: x["mtime"], reverse=True)
        return outputs
