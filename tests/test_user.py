import os
import pwd
from types import SimpleNamespace
from unittest import mock

from barstatus.components.user import gid, uid, username


def test_uid_is_effective_user():
    assert uid() == str(os.geteuid())


def test_gid_is_real_group():
    assert gid(None) == str(os.getgid())


def test_username_matches_password_database():
    assert username() == pwd.getpwuid(os.geteuid()).pw_name


def test_username_from_lookup():
    with mock.patch("pwd.getpwuid", return_value=SimpleNamespace(pw_name="alice")):
        assert username() == "alice"


def test_username_unknown_user(capsys):
    with mock.patch("pwd.getpwuid", side_effect=KeyError("missing")):
        assert username() is None
    assert "getpwuid" in capsys.readouterr().err