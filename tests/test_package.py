import os

import chromaselect


def test_package_is_imported_from_working_tree():
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    package_dir = os.path.dirname(os.path.abspath(chromaselect.__file__))
    assert package_dir == os.path.join(project_root, "chromaselect")


def test_version():
    assert chromaselect.__version__ == "0.1.0"
