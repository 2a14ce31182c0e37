import cvscope
from cvscope import _about


def test_metadata_is_reexported():
    assert cvscope.__version__ == _about.__version__
    assert cvscope.__license__ == "MIT"


def test_public_api():
    for name in ("FilterSession", "SessionState", "FilterKind", "FILTERS", "get_filter", "VideoSourceError"):
        assert name in cvscope.__all__
        assert hasattr(cvscope, name)
