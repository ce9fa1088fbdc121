import pytest

from ircchat.irc.models import RegistrationInformation, ServerInformation


@pytest.fixture
def server_info() -> ServerInformation:
    return ServerInformation(host_name="irc.example.net", port=6667)


@pytest.fixture
def registration_info() -> RegistrationInformation:
    return RegistrationInformation(
        nickname="tester", username="tuser", real_name="Test User"
    )
