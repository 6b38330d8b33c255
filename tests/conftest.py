import pytest

from app.output.channels import ApiEmailProvider, ChatChannel, SmtpEmailProvider
from app.schemas.contact import ContactSubmission


@pytest.fixture
def submission():
    return ContactSubmission(name="Ada", email="ada@example.com", message="Hello")


@pytest.fixture
def chat_channel():
    return ChatChannel(token="123:abc", chat_id="42")


@pytest.fixture
def api_provider():
    return ApiEmailProvider(api_key="re_test", recipient="owner@example.com")


@pytest.fixture
def smtp_provider():
    return SmtpEmailProvider(user="owner@example.com", password="passkey")
