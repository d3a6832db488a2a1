# lambdas/site_builder/walker.py
import os
from pathlib import Path
from typing import List


def walk_template(root: Path) -> List[Path]:
    """
    Recursively lists every file under the template directory.
    Directories themselves are not returned.
    """
    files = []
    for dirpath, _, filenames in os.walk(root):
        for name in filenames:
            files.append(Path(dirpath) / name)
    return sorted(files)
