"""Tests for credential redaction."""

from aramex.utils.redaction import redact_envelope, redact_for_logging


class TestRedactForLogging:

    def test_redacts_client_info_credentials(self):
        data = {
            "ClientInfo": {
                "UserName": "testingapi@aramex.com",
                "Password": "R123456789$r",
                "AccountNumber": "20000068",
                "AccountPin": "543543",
            },
            "Reference": "PK-1",
        }

        result = redact_for_logging(data)

        assert result["ClientInfo"]["Password"] == "***REDACTED***"
        assert result["ClientInfo"]["AccountPin"] == "***REDACTED***"
        assert result["ClientInfo"]["UserName"] == "testingapi@aramex.com"
        assert result["Reference"] == "PK-1"

    def test_snake_case_keys(self):
        result = redact_for_logging({"account_pin": "1", "password": "2", "username": "u"})

        assert result == {"account_pin": "***REDACTED***", "password": "***REDACTED***", "username": "u"}

    def test_shipping_fields_not_redacted(self):
        """Keys that merely contain 'pin' as part of a word survive."""
        data = {"ShippingDateTime": "2026-01-01", "PickupLocation": "Reception"}

        assert redact_for_logging(data) == data

    def test_list_of_dicts(self):
        result = redact_for_logging({"items": [{"token": "t"}, "plain"]})

        assert result["items"] == [{"token": "***REDACTED***"}, "plain"]

    def test_container_keys(self):
        result = redact_for_logging({"headers": {"SOAPAction": "x"}})

        assert result["headers"] == "***REDACTED***"

    def test_input_not_mutated(self):
        data = {"Password": "secret"}

        redact_for_logging(data)

        assert data == {"Password": "secret"}


class TestRedactEnvelope:

    def test_namespaced_elements(self):
        xml = "<ns0:Password>R123</ns0:Password><ns0:AccountPin>543543</ns0:AccountPin>"

        result = redact_envelope(xml)

        assert result == (
            "<ns0:Password>***REDACTED***</ns0:Password>"
            "<ns0:AccountPin>***REDACTED***</ns0:AccountPin>"
        )

    def test_bare_elements(self):
        assert redact_envelope("<Password>x</Password>") == "<Password>***REDACTED***</Password>"

    def test_other_elements_untouched(self):
        xml = "<UserName>me</UserName><AccountNumber>20000068</AccountNumber>"

        assert redact_envelope(xml) == xml

    def test_none(self):
        assert redact_envelope(None) is None
