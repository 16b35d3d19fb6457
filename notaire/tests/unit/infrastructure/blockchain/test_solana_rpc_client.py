"""
Unit tests for SolanaRpcClient.

The aiohttp session is replaced by a scripted stand-in, so no network
access is needed.

Usage:
    python -m tests.unit.infrastructure.blockchain.test_solana_rpc_client
    laborant notaire --unit
"""

import aiohttp

from notaire.domain.exceptions import LedgerClientError
from shared.tests import LaborantTest
from tests.helpers.keys import ALICE_WALLET
from tests.helpers.rpc import RPC_URL, ScriptedResponse, scripted_rpc_client
from tests.helpers.transactions import TX_SIGNATURE, compiled_burn_result


class TestSolanaRpcClient(LaborantTest):
    """Unit tests for SolanaRpcClient."""

    component_name = "notaire"
    test_category = "unit"

    def _client(self, *responses, max_retries=1, encoding="json"):
        return scripted_rpc_client(
            *responses, max_retries=max_retries, encoding=encoding
        )

    async def _expect_ledger_error(self, client) -> LedgerClientError:
        try:
            await client.get_confirmed_transaction(TX_SIGNATURE)
            assert False, "Should have raised LedgerClientError"
        except LedgerClientError as e:
            assert e.tx_signature == TX_SIGNATURE
            return e

    async def test_fetch_transaction(self):
        """Test request payload and parsed result."""
        self.reporter.info("Testing getTransaction", context="Test")

        body = {
            "jsonrpc": "2.0",
            "id": 1,
            "result": compiled_burn_result(ALICE_WALLET, 500, memo="abc"),
        }
        client = self._client(ScriptedResponse(body))

        tx = await client.get_confirmed_transaction(TX_SIGNATURE)

        assert tx is not None
        assert tx.signature == TX_SIGNATURE
        assert tx.static_account_keys[0] == ALICE_WALLET

        request = client._session.requests[0]
        assert request["url"] == RPC_URL
        assert request["json"]["method"] == "getTransaction"
        params = request["json"]["params"]
        assert params[0] == TX_SIGNATURE
        assert params[1] == {
            "encoding": "json",
            "commitment": "confirmed",
            "maxSupportedTransactionVersion": 0,
        }

    async def test_unknown_transaction(self):
        """Test a null result maps to None."""
        client = self._client(ScriptedResponse({"jsonrpc": "2.0", "result": None}))

        assert await client.get_confirmed_transaction(TX_SIGNATURE) is None

    async def test_rpc_error(self):
        self.reporter.info("Testing JSON-RPC error object", context="Test")

        body = {"jsonrpc": "2.0", "error": {"code": -32602, "message": "bad sig"}}
        client = self._client(ScriptedResponse(body))

        try:
            await client.get_confirmed_transaction(TX_SIGNATURE)
            assert False, "Should have raised LedgerClientError"
        except LedgerClientError as e:
            assert "-32602" in e.message
            assert e.tx_signature == TX_SIGNATURE
            assert e.code == "LEDGER_RPC_ERROR"

    async def test_malformed_result(self):
        body = {"jsonrpc": "2.0", "result": {"transaction": ["AQ==", "base64"]}}
        client = self._client(ScriptedResponse(body))

        try:
            await client.get_confirmed_transaction(TX_SIGNATURE)
            assert False, "Should have raised LedgerClientError"
        except LedgerClientError as e:
            assert "Malformed" in e.message

    async def test_invalid_json_body(self):
        """Test an unparseable body surfaces as LedgerClientError."""
        self.reporter.info("Testing invalid JSON body", context="Test")

        client = self._client(ScriptedResponse(raw="<html>bad gateway</html>"))

        e = await self._expect_ledger_error(client)
        assert "invalid JSON" in e.message

    async def test_non_object_body(self):
        client = self._client(ScriptedResponse(["not", "an", "object"]))

        e = await self._expect_ledger_error(client)
        assert "Unexpected RPC response" in e.message

    async def test_non_object_result(self):
        """Test a result that is not a transaction object is rejected."""
        self.reporter.info("Testing non-object result", context="Test")

        body = {"jsonrpc": "2.0", "result": ["unexpected"]}
        client = self._client(ScriptedResponse(body))

        e = await self._expect_ledger_error(client)
        assert "Malformed" in e.message

    async def test_malformed_message(self):
        body = {
            "jsonrpc": "2.0",
            "result": {"transaction": {"message": ["not", "a", "message"]}},
        }
        client = self._client(ScriptedResponse(body))

        e = await self._expect_ledger_error(client)
        assert "Malformed" in e.message

    async def test_transport_error(self):
        """Test exhausted transport retries surface as LedgerClientError."""
        self.reporter.info("Testing transport failure", context="Test")

        client = self._client(
            ScriptedResponse(error=aiohttp.ClientConnectionError("refused"))
        )

        try:
            await client.get_confirmed_transaction(TX_SIGNATURE)
            assert False, "Should have raised LedgerClientError"
        except LedgerClientError as e:
            assert "transport" in e.message

    async def test_transport_error_is_retried(self):
        """Test a transient failure followed by a good answer."""
        body = {"jsonrpc": "2.0", "result": compiled_burn_result(ALICE_WALLET, 5)}
        client = self._client(
            ScriptedResponse(error=aiohttp.ClientConnectionError("reset")),
            ScriptedResponse(body),
            max_retries=2,
        )

        tx = await client.get_confirmed_transaction(TX_SIGNATURE)

        assert tx is not None
        assert len(client._session.requests) == 2

    async def test_close(self):
        client = self._client()
        session = client._session

        await client.close()

        assert session.closed
        assert client._session is None


if __name__ == "__main__":
    TestSolanaRpcClient.run_as_main()
