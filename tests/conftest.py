# File: tests/conftest.py

import pytest
import os
import sys

# 1. Add project root to path
sys.path.append(os.getcwd())


@pytest.fixture
def flat_folder(tmp_path):
    """
    Two text files side by side:
        a.txt -> "Content 1"
        b.txt -> "Content 2"
    """
    root = tmp_path / "flat"
    root.mkdir()
    (root / "a.txt").write_text("Content 1", encoding="utf-8")
    (root / "b.txt").write_text("Content 2", encoding="utf-8")
    return root


@pytest.fixture
def project_tree(tmp_path):
    """
    Creates a nested source tree:

        project/
            main.py
            README.md
            notes.TXT
            src/
                app.py
                util.py
                gen/
                    schema.py
            exclude/
                skip.py
            exclude2/
                keep.py
            build/
                out.log
    """
    root = tmp_path / "project"
    root.mkdir()

    (root / "main.py").write_text("print('main')")
    (root / "README.md").write_text("# Readme")
    (root / "notes.TXT").write_text("notes")

    src = root / "src"
    src.mkdir()
    (src / "app.py").write_text("app = 1")
    (src / "util.py").write_text("util = 2")

    gen = src / "gen"
    gen.mkdir()
    (gen / "schema.py").write_text("schema = 3")

    excluded = root / "exclude"
    excluded.mkdir()
    (excluded / "skip.py").write_text("skip = True")

    sibling = root / "exclude2"
    sibling.mkdir()
    (sibling / "keep.py").write_text("keep = True")

    build = root / "build"
    build.mkdir()
    (build / "out.log").write_text("log line")

    return root

