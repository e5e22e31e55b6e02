from app.core.security import verify_admin_token


def test_exact_bearer_token_accepted():
    assert verify_admin_token("Bearer secret", "secret")


def test_wrong_tokens_rejected():
    assert not verify_admin_token("Bearer secretx", "secret")
    assert not verify_admin_token("bearer secret", "secret")
    assert not verify_admin_token("secret", "secret")
    assert not verify_admin_token(None, "secret")


def test_no_configured_token_rejects_everything():
    assert not verify_admin_token("Bearer ", None)
    assert not verify_admin_token("Bearer ", "")
