"""Tests for the finance API adapter -- key handling, parsing, and failures."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
import requests

from stockfolio.data.adapters.finance_api import FinanceApiProvider
from stockfolio.errors import KeyNotSetError, LookupFailedError, PriceUnavailableError

# ---------------------------------------------------------------------------
# Mock responses
# ---------------------------------------------------------------------------

def _make_response(payload, status_code=200):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = payload
    return resp


def _quote_payload(**overrides):
    quote = {
        "symbol": "AAPL",
        "regularMarketPrice": 201.5,
        "regularMarketChange": -1.25,
        "regularMarketChangePercent": -0.62,
        "currency": "USD",
        "typeDisp": "Equity",
        "longName": "Apple Inc.",
    }
    quote.update(overrides)
    return {"quoteResponse": {"result": [quote], "error": None}}


# ---------------------------------------------------------------------------
# Tests: key handling
# ---------------------------------------------------------------------------

class TestKeyNotSet:
    @pytest.mark.parametrize("method", ["get_latest_price", "get_quote", "search"])
    def test_no_request_without_key(self, method):
        provider = FinanceApiProvider(api_key="")
        with patch("requests.get") as mock_get:
            with pytest.raises(KeyNotSetError):
                getattr(provider, method)("AAPL")
        mock_get.assert_not_called()

    def test_has_key(self):
        assert not FinanceApiProvider().has_key
        assert FinanceApiProvider(api_key="k").has_key

    def test_sends_key_header(self):
        provider = FinanceApiProvider(api_key="secret", base_url="https://example.test/")
        with patch("requests.get", return_value=_make_response(_quote_payload())) as mock_get:
            provider.get_quote("AAPL")
        args, kwargs = mock_get.call_args
        assert args[0] == "https://example.test/v6/finance/quote"
        assert kwargs["headers"]["X-API-KEY"] == "secret"
        assert kwargs["params"]["symbols"] == "AAPL"
        assert kwargs["timeout"] == provider.timeout


# ---------------------------------------------------------------------------
# Tests: quotes
# ---------------------------------------------------------------------------

class TestQuote:
    def test_parses_quote(self):
        provider = FinanceApiProvider(api_key="k")
        with patch("requests.get", return_value=_make_response(_quote_payload())):
            quote = provider.get_quote("AAPL")
        assert quote.price == 201.5
        assert quote.day_change == -1.25
        assert quote.day_change_percent == -0.62
        assert quote.currency == "USD"
        assert quote.type_disp == "Equity"
        assert quote.name == "Apple Inc."

    def test_latest_price(self):
        provider = FinanceApiProvider(api_key="k")
        with patch("requests.get", return_value=_make_response(_quote_payload())):
            assert provider.get_latest_price("AAPL") == 201.5

    def test_missing_price_is_unavailable(self):
        provider = FinanceApiProvider(api_key="k")
        payload = _quote_payload(regularMarketPrice=None)
        with patch("requests.get", return_value=_make_response(payload)):
            with pytest.raises(PriceUnavailableError) as exc:
                provider.get_latest_price("AAPL")
        assert exc.value.symbol == "AAPL"

    @pytest.mark.parametrize("raw", ["N/A", {"raw": 1.0}, "nan", "inf"])
    def test_unusable_price_is_unavailable(self, raw):
        """Non-numeric or non-finite prices are reported as unavailable."""
        provider = FinanceApiProvider(api_key="k")
        payload = _quote_payload(regularMarketPrice=raw)
        with patch("requests.get", return_value=_make_response(payload)):
            with pytest.raises(PriceUnavailableError) as exc:
                provider.get_latest_price("AAPL")
        assert exc.value.details["raw"] == raw

    def test_empty_result_is_lookup_failure(self):
        provider = FinanceApiProvider(api_key="k")
        payload = {"quoteResponse": {"result": [], "error": None}}
        with patch("requests.get", return_value=_make_response(payload)):
            with pytest.raises(LookupFailedError):
                provider.get_quote("NOPE")

    def test_http_error(self):
        provider = FinanceApiProvider(api_key="k")
        with patch("requests.get", return_value=_make_response({}, status_code=403)):
            with pytest.raises(LookupFailedError) as exc:
                provider.get_quote("AAPL")
        assert exc.value.details["status_code"] == 403

    def test_network_error(self):
        provider = FinanceApiProvider(api_key="k")
        with patch("requests.get", side_effect=requests.ConnectionError("offline")):
            with pytest.raises(LookupFailedError):
                provider.get_latest_price("AAPL")

    def test_malformed_json(self):
        provider = FinanceApiProvider(api_key="k")
        resp = _make_response(None)
        resp.json.side_effect = ValueError("not json")
        with patch("requests.get", return_value=resp):
            with pytest.raises(LookupFailedError):
                provider.get_quote("AAPL")


# ---------------------------------------------------------------------------
# Tests: search
# ---------------------------------------------------------------------------

class TestSearch:
    def test_parses_results(self):
        provider = FinanceApiProvider(api_key="k")
        payload = {
            "ResultSet": {
                "Query": "app",
                "Result": [
                    {"symbol": "AAPL", "name": "Apple Inc.", "exch": "NAS",
                     "type": "S", "exchDisp": "NASDAQ", "typeDisp": "Equity"},
                    {"symbol": "APP", "name": "AppLovin", "exch": "NMS", "type": "S"},
                ],
            }
        }
        with patch("requests.get", return_value=_make_response(payload)) as mock_get:
            results = provider.search("app")
        assert mock_get.call_args.kwargs["params"]["query"] == "app"
        assert [r.symbol for r in results] == ["AAPL", "APP"]
        assert results[0].exchange == "NASDAQ"
        assert results[1].exchange == "NMS"
        assert results[1].type_disp == "S"

    def test_no_results(self):
        provider = FinanceApiProvider(api_key="k")
        with patch("requests.get", return_value=_make_response({"ResultSet": {"Result": []}})):
            assert provider.search("zzzz") == []
