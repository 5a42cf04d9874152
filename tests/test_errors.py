import pytest

from metaset.errors import ProcessingError, ProcessingErrorType


@pytest.mark.parametrize(
    "error_type, text",
    [
        (ProcessingErrorType.INVALID_CONFIG, "InvalidConfig"),
        (ProcessingErrorType.EXTERNAL_FAILURE, "ExternalFailure"),
        (ProcessingErrorType.TOO_MANY_INPUTS, "TooManyInputs"),
        (ProcessingErrorType.MISSING_INPUTS, "MissingInputs"),
        (ProcessingErrorType.INVALID_INPUTS, "InvalidInputs"),
        (ProcessingErrorType.INVALID_INPUT_ID, "InvalidInputId"),
    ],
)
def test_error_type_text(error_type, text):
    assert str(error_type) == text


def test_error_text_with_node_id():
    error = ProcessingError(ProcessingErrorType.INVALID_CONFIG, 3)
    assert str(error) == "node_id: 3, error_type: InvalidConfig"


def test_error_text_without_node_id():
    error = ProcessingError(ProcessingErrorType.MISSING_INPUTS, None)
    assert str(error) == "node_id: null, error_type: MissingInputs"


def test_node_id_defaults_to_none():
    error = ProcessingError(ProcessingErrorType.EXTERNAL_FAILURE)
    assert error.node_id is None
    assert str(error) == "node_id: null, error_type: ExternalFailure"


def test_error_can_be_raised_and_caught():
    error = ProcessingError(ProcessingErrorType.TOO_MANY_INPUTS, 7)
    with pytest.raises(ProcessingError) as info:
        raise error
    assert info.value is error
    assert info.value.error_type is ProcessingErrorType.TOO_MANY_INPUTS
    assert info.value.node_id == 7
    assert str(info.value) == "node_id: 7, error_type: TooManyInputs"