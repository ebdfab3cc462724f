import graphsuite
from graphsuite import errors


def test_public_api_is_importable():
    for name in graphsuite.__all__:
        assert hasattr(graphsuite, name), name


def test_version_string():
    assert graphsuite.__version__.count(".") == 2


def test_error_hierarchy():
    assert issubclass(errors.VertexNotFoundError, KeyError)
    assert issubclass(errors.EdgeNotFoundError, KeyError)
    assert issubclass(errors.InvalidHandleError, KeyError)
    for cls in (
        errors.DirectedGraphError,
        errors.WeightRequiredError,
        errors.NegativeWeightError,
        errors.DisconnectedGraphError,
    ):
        assert issubclass(cls, errors.GraphPreconditionError)
    assert issubclass(errors.GraphPreconditionError, ValueError)
    assert issubclass(errors.NegativeCycleError, ValueError)
    assert issubclass(errors.GraphFormatError, ValueError)
    for name in dir(errors):
        obj = getattr(errors, name)
        if isinstance(obj, type) and issubclass(obj, Exception):
            assert issubclass(obj, errors.GraphError)


def test_invalid_handle_error_message():
    assert str(errors.InvalidHandleError()) == "Invalid heap handle."
    assert str(errors.InvalidHandleError("stale")) == "stale"
