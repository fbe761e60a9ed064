from langbridge.core.exceptions import ConflictError, LangBridgeError, NotFoundError


def test_status_code_defaults_to_class_value():
    assert NotFoundError("User not found").status_code == 404
    assert ConflictError("Already friends").status_code == 400


def test_status_code_can_be_overridden():
    error = LangBridgeError("Gone", status_code=410)

    assert error.status_code == 410
    assert error.message == "Gone"
