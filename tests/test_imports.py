"""Test that all modules can be imported successfully."""


def test_core_imports():
    """Test core module imports."""
    from metapath.core import Config, ComponentKind, PathNormalizer, normalize, split_components

    config = Config(flavour="posix")
    assert config.max_file_size == 1024 * 1024

    assert len(ComponentKind) == 5
    assert PathNormalizer("posix").normalize("a/../b") == "b"
    assert normalize("./x", "posix") == "x"
    assert split_components("", "posix") == []


def test_package_exports():
    """Test top-level package exports."""
    import metapath

    assert metapath.normalize("a//b", "posix") == "a/b"
    assert hasattr(metapath, "__version__")


def test_utils_imports():
    """Test utils module imports."""
    from metapath.utils import EncodingDetector, make_console

    assert hasattr(EncodingDetector(), 'decode')
    assert make_console("matrix") is not None


def test_metadata_imports():
    """Test metadata module imports."""
    from metapath.metadata import MetaReader, YamlMetaReader

    assert issubclass(YamlMetaReader, MetaReader)
