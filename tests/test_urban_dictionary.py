"""
Unit Tests for the Urban Dictionary Client
==========================================
"""
from unittest.mock import Mock

import pytest
import requests

from slang_translator.services.urban_dictionary import (
    UrbanDefinition,
    UrbanDictionaryClient,
    clean_definition
)


def fake_response(status_code=200, payload=None, json_error=None):
    response = Mock()
    response.status_code = status_code
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def client():
    client = UrbanDictionaryClient(base_url='https://ud.example.test/define', timeout=2)
    client.session = Mock()
    return client


class TestCleanDefinition:

    def test_strips_markup_and_extra_lines(self):
        text = "[Rizz] is short for [charisma].\r\nSecond line with [more]"
        assert clean_definition(text) == "Rizz is short for charisma."

    def test_truncates(self):
        assert clean_definition("x" * 400, max_length=20) == "x" * 20

    def test_empty(self):
        assert clean_definition("") == ""
        assert clean_definition(None) == ""


class TestUrbanDefinition:

    @pytest.mark.parametrize("up,down,expected", [
        (500, 20, 100),
        (80, 10, 70),
        (10, 5, 50),
        (0, 40, 50),
    ])
    def test_confidence_clamped(self, up, down, expected):
        assert UrbanDefinition('w', 'm', thumbs_up=up, thumbs_down=down).confidence == expected


class TestDefine:

    def test_top_definition(self, client):
        client.session.get.return_value = fake_response(payload={'list': [
            {
                'word': 'Rizz',
                'definition': '[Charisma], especially when flirting\nmore text',
                'permalink': 'https://ud.example.test/rizz',
                'thumbs_up': 120,
                'thumbs_down': 40,
            },
            {'word': 'rizz', 'definition': 'second definition'},
        ]})

        definition = client.define('rizz')

        client.session.get.assert_called_once_with(
            'https://ud.example.test/define', params={'term': 'rizz'}, timeout=2
        )
        assert definition.word == 'Rizz'
        assert definition.meaning == 'Charisma, especially when flirting'
        assert definition.permalink == 'https://ud.example.test/rizz'
        assert definition.confidence == 80

    def test_no_results(self, client):
        client.session.get.return_value = fake_response(payload={'list': []})
        assert client.define('glorpflux') is None

    def test_blank_definition(self, client):
        client.session.get.return_value = fake_response(payload={'list': [{'word': 'x', 'definition': '[]'}]})
        assert client.define('x') is None

    def test_http_error(self, client):
        client.session.get.return_value = fake_response(status_code=503)
        assert client.define('rizz') is None

    def test_network_error(self, client):
        client.session.get.side_effect = requests.ConnectionError("unreachable")
        assert client.define('rizz') is None

    def test_timeout(self, client):
        client.session.get.side_effect = requests.Timeout("slow")
        assert client.define('rizz') is None

    def test_invalid_json(self, client):
        client.session.get.return_value = fake_response(json_error=ValueError("bad json"))
        assert client.define('rizz') is None
