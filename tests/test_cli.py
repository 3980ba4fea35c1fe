import pytest

from flickr_typed.api.signing import Credentials
from flickr_typed.cli import parse_arguments
from flickr_typed.errors import TransportError
from flickr_typed.main import FlickrTypedApp

from conftest import FAIL_BODY, OK_BODY, PERSON_BODY, PHOTOSET_PHOTOS_BODY, PHOTOSETS_LIST_BODY, RecordingClient


def app_for(client):
    return FlickrTypedApp(client_factory=lambda: client)


def test_parse_arguments():
    args = parse_arguments(["photos", "72157624618609504", "--page", "2", "--auth"])
    assert args.command == "photos"
    assert args.photoset_id == "72157624618609504"
    assert args.page == 2
    assert args.auth is True
    assert args.user == ""


def test_parse_arguments_rejects_zero_page():
    with pytest.raises(SystemExit):
        parse_arguments(["sets", "--page", "0"])


def test_sets_command(capsys):
    client = RecordingClient(PHOTOSETS_LIST_BODY)

    status = app_for(client).run(["sets", "--user", "12@N01"])

    assert status == 0
    assert client.last.method == "flickr.photosets.getList"
    assert dict(client.last.params) == {'user_id': "12@N01"}
    out = capsys.readouterr().out
    assert "Avis Blanche" in out
    assert "5 sets" in out


def test_photos_command(capsys):
    client = RecordingClient(PHOTOSET_PHOTOS_BODY)

    status = app_for(client).run(["photos", "72157624618609504", "--page", "2"])

    assert status == 0
    assert client.last.params['page'] == "2"
    out = capsys.readouterr().out
    assert "Niner" in out and "Sixty" in out


def test_person_command(capsys):
    client = RecordingClient(PERSON_BODY)

    status = app_for(client).run(["person", "12037949754@N01", "--auth"])

    assert status == 0
    out = capsys.readouterr().out
    assert "bees" in out
    assert "America/Vancouver" in out
    assert "2009-02-13 23:31:30" in out


def test_failed_envelope_exits_non_zero(capsys):
    status = app_for(RecordingClient(FAIL_BODY)).run(["person", "nobody"])

    assert status == 1
    assert "Photoset not found" in capsys.readouterr().out


@pytest.mark.parametrize("argv, element", [
    (["sets"], "photosets"),
    (["photos", "72157624618609504"], "photoset"),
    (["person", "12037949754@N01"], "person"),
])
def test_ok_envelope_without_payload_exits_non_zero(capsys, argv, element):
    status = app_for(RecordingClient(OK_BODY)).run(argv)

    assert status == 1
    assert f"no <{element}> element" in capsys.readouterr().out


def test_library_errors_exit_non_zero(capsys):
    class BrokenClient:
        def execute(self, request, response_type):
            raise TransportError("http GET: connection refused")

    status = app_for(BrokenClient()).run(["sets"])

    assert status == 1
    assert "connection refused" in capsys.readouterr().out


def test_missing_configuration_exits_non_zero(monkeypatch, capsys):
    monkeypatch.delenv("API_KEY")

    status = app_for(RecordingClient()).run(["sets"])

    assert status == 1
    assert "API_KEY" in capsys.readouterr().out


def test_auth_command_prints_token(capsys):
    seen = {}

    def fake_authorize(perms):
        seen['perms'] = perms
        return Credentials("test-key", "test-secret", "tok", "sec")

    status = FlickrTypedApp(authorizer=fake_authorize).run(["auth", "--perms", "write"])

    assert status == 0
    assert seen['perms'] == "write"
    out = capsys.readouterr().out
    assert "OAUTH_TOKEN=tok" in out
    assert "OAUTH_TOKEN_SECRET=sec" in out


def test_log_file_written(tmp_path):
    app_for(RecordingClient(PHOTOSETS_LIST_BODY)).run(["sets"])

    log_file = tmp_path / "cache" / "flickr_typed.log"
    assert log_file.exists()
