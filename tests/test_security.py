from security import hash_password, verify_password


def test_hash_is_salted():
    first = hash_password("hunter2")
    second = hash_password("hunter2")

    assert first != second
    assert first != "hunter2"


def test_verify_password():
    hashed = hash_password("hunter2")

    assert verify_password("hunter2", hashed)
    assert not verify_password("hunter3", hashed)


def test_passwords_past_bcrypt_limit_are_distinguished():
    hashed = hash_password("x" * 100 + "a")

    assert verify_password("x" * 100 + "a", hashed)
    assert not verify_password("x" * 100 + "b", hashed)
