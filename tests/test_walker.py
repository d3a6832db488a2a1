# tests/test_walker.py
from lambdas.site_builder.walker import walk_template


def test_walk_template_lists_files_recursively(template_dir):
    files = walk_template(template_dir)

    relative = sorted(p.relative_to(template_dir).as_posix() for p in files)
    assert relative == [
        ".DS_Store",
        "assets/.DS_Store",
        "assets/css/main.css",
        "assets/sass/main.scss",
        "index.html",
    ]
    assert all(p.is_file() for p in files), "Directories should not be listed"


def test_walk_template_empty_directory(tmp_path):
    (tmp_path / "empty" / "nested").mkdir(parents=True)

    assert walk_template(tmp_path / "empty") == []
