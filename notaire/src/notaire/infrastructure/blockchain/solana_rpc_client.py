"""
Solana JSON-RPC ledger client.

Fetches confirmed transactions with ``getTransaction``. Transient transport
errors are retried here; callers only see a transaction, None, or a
LedgerClientError.
"""

import asyncio
from typing import Optional

import aiohttp
from tenacity import (
    AsyncRetrying,
    RetryError,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from notaire.domain.entities.ledger_transaction import ConfirmedTransaction
from notaire.domain.exceptions.blockchain import LedgerClientError
from notaire.domain.services.i_ledger_client import ILedgerClient
from notaire.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


class SolanaRpcClient(ILedgerClient):
    """
    Solana RPC client for confirmed-transaction lookups.

    Owns one lazily created aiohttp session with a pooled connector.
    """

    def __init__(
        self,
        rpc_url: str,
        commitment: str = "confirmed",
        encoding: str = "json",
        total_timeout: int = 10,
        connect_timeout: int = 3,
        max_retries: int = 3,
    ):
        """
        Initialize Solana RPC client.

        Args:
            rpc_url: Solana RPC endpoint URL
            commitment: Commitment level for lookups (default: confirmed)
            encoding: Transaction encoding, ``json`` or ``jsonParsed``
            total_timeout: Total request timeout in seconds (default: 10s)
            connect_timeout: Connection timeout in seconds (default: 3s)
            max_retries: Max attempts for transient failures (default: 3)
        """
        self.rpc_url = rpc_url
        self.commitment = commitment
        self.encoding = encoding
        self.timeout = aiohttp.ClientTimeout(
            total=total_timeout,
            connect=connect_timeout,
        )
        self.max_retries = max_retries
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                connector=aiohttp.TCPConnector(
                    limit=100,
                    limit_per_host=30,
                    ttl_dns_cache=300,
                ),
            )
        return self._session

    async def get_confirmed_transaction(
        self,
        tx_signature: str,
    ) -> Optional[ConfirmedTransaction]:
        """
        Fetch transaction by signature.

        Includes automatic retries for transient network errors.

        Args:
            tx_signature: Transaction signature

        Returns:
            ConfirmedTransaction, or None if the node does not know it

        Raises:
            LedgerClientError: If the node keeps failing or returns an error
        """
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.max_retries),
                wait=wait_exponential(multiplier=1, min=1, max=4),
                retry=retry_if_exception_type(
                    (aiohttp.ClientError, asyncio.TimeoutError)
                ),
                reraise=True,
            ):
                with attempt:
                    return await self._get_transaction_once(tx_signature)
        except RetryError:
            raise LedgerClientError(
                f"RPC lookup failed after {self.max_retries} attempts",
                tx_signature=tx_signature,
            )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(
                f"RPC transport error: {e!r}",
                extra={"tx_signature": tx_signature, "rpc_url": self.rpc_url},
            )
            raise LedgerClientError(
                f"RPC transport error: {e!r}",
                tx_signature=tx_signature,
            ) from e

    async def _get_transaction_once(
        self,
        tx_signature: str,
    ) -> Optional[ConfirmedTransaction]:
        """Single attempt (called by retry logic)."""
        session = await self._get_session()

        payload = {
            "jsonrpc": "2.0",
            "id": 1,
            "method": "getTransaction",
            "params": [
                tx_signature,
                {
                    "encoding": self.encoding,
                    "commitment": self.commitment,
                    "maxSupportedTransactionVersion": 0,
                },
            ],
        }

        async with session.post(self.rpc_url, json=payload) as response:
            response.raise_for_status()
            try:
                data = await response.json()
            except ValueError as e:
                raise LedgerClientError(
                    f"RPC returned invalid JSON: {e}",
                    tx_signature=tx_signature,
                ) from e

        if not isinstance(data, dict):
            raise LedgerClientError(
                f"Unexpected RPC response: {type(data).__name__}",
                tx_signature=tx_signature,
            )

        if "error" in data:
            error = data["error"] if isinstance(data["error"], dict) else {}
            raise LedgerClientError(
                f"RPC error {error.get('code')}: {error.get('message')}",
                tx_signature=tx_signature,
            )

        result = data.get("result")
        if not result:
            return None
        if not isinstance(result, dict):
            raise LedgerClientError(
                f"Malformed transaction payload: {type(result).__name__} result",
                tx_signature=tx_signature,
            )

        try:
            return ConfirmedTransaction.from_rpc(tx_signature, result)
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            raise LedgerClientError(
                f"Malformed transaction payload: {e}",
                tx_signature=tx_signature,
            ) from e

    async def close(self) -> None:
        """Close HTTP session and cleanup resources."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None
