"""Typed client for the Fuel GraphQL API.

Each method builds one query from the type table and a set of suppression
rules, executes it and decodes the response into the generated types.

Example:
    async with FuelClient("https://testnet.fuel.network/v1/graphql") as client:
        block = await client.get_block(
            QueryBlockParams(height=9758550),
            GetBlockOption(with_consensus=True),
        )
        block.header.time   # datetime(2024, 4, 15, 2, 44, 2, tzinfo=timezone.utc)
"""

import logging
from dataclasses import dataclass
from typing import Any, Sequence

import httpx

from .config import ClientConfig
from .core.codec import Codec
from .core.executor import GraphQLExecutor
from .core.ir import TypeRegistry
from .core.query_builder import QueryBuilder
from .core.suppress import SuppressionRule, keep_only, merge, suppress_field, suppress_type
from .types import (
    SCHEMA,
    Block,
    ChainInfo,
    Contract,
    FailureStatus,
    Header,
    QueryBlockParams,
    QueryTransactionParams,
    Receipt,
    SuccessStatus,
    Transaction,
)

logger = logging.getLogger(__name__)


def _contract_rules(with_bytecode: bool, with_salt: bool) -> list[SuppressionRule]:
    rules = []
    if not with_bytecode:
        rules.append(suppress_field(Contract, "bytecode"))
    if not with_salt:
        rules.append(suppress_field(Contract, "salt"))
    return rules


@dataclass(frozen=True)
class GetBlockOption:
    """What to request along with a block.

    By default only the block id and the full header are requested.
    """
    with_transactions: bool = False
    with_consensus: bool = False
    header_only_id_height: bool = False
    transaction_only_id: bool = False
    with_contract_bytecode: bool = False
    with_contract_salt: bool = False

    def build_suppression(self) -> SuppressionRule:
        rules = []
        if not self.with_transactions:
            rules.append(suppress_type(Transaction))
        if not self.with_consensus:
            rules.append(suppress_field(Block, "consensus"))
        if self.header_only_id_height:
            rules.append(keep_only(Header, "id", "height"))
        if self.transaction_only_id:
            rules.append(keep_only(Transaction, "id"))
        else:
            # Transaction -> status -> block -> transactions
            rules.extend([
                suppress_field(SuccessStatus, "block"),
                suppress_field(SuccessStatus, "receipts"),
                suppress_field(FailureStatus, "block"),
                suppress_field(FailureStatus, "receipts"),
            ])
        rules.extend(_contract_rules(self.with_contract_bytecode, self.with_contract_salt))
        return merge(*rules)


@dataclass(frozen=True)
class GetTransactionOption:
    """What to request along with a transaction."""
    with_receipts: bool = False
    with_status: bool = False
    with_contract_bytecode: bool = False
    with_contract_salt: bool = False

    def build_suppression(self) -> SuppressionRule:
        rules = [suppress_field(Block, "transactions")]
        rules.extend(_contract_rules(self.with_contract_bytecode, self.with_contract_salt))
        if not self.with_receipts:
            rules.append(suppress_type(Receipt))
        if not self.with_status:
            rules.append(suppress_field(Transaction, "status"))
        return merge(*rules)


@dataclass(frozen=True)
class GetChainOption:
    """What to request along with the chain info.

    The latest block is always requested without its transactions.
    """
    with_consensus_parameters: bool = False

    def build_suppression(self) -> SuppressionRule:
        rules = [suppress_field(Block, "transactions")]
        if not self.with_consensus_parameters:
            rules.append(suppress_field(ChainInfo, "consensusParameters"))
        return merge(*rules)


class FuelClient:
    """Async client for a Fuel node.

    Usable as an async context manager; otherwise call :meth:`close` when
    done.
    """

    def __init__(
        self,
        endpoint: str,
        headers: dict[str, str] | None = None,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
        registry: TypeRegistry = SCHEMA,
    ):
        self.executor = GraphQLExecutor(endpoint, headers, timeout=timeout, transport=transport)
        self.registry = registry
        self.builder = QueryBuilder(registry)
        self.codec = Codec(registry)

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> "FuelClient":
        return cls(config.endpoint, config.headers, timeout=config.timeout, **kwargs)

    async def __aenter__(self) -> "FuelClient":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def close(self):
        await self.executor.close()

    async def get_block(
        self,
        params: QueryBlockParams,
        option: GetBlockOption = GetBlockOption(),
    ) -> Block | None:
        """Fetch one block by id or height; None if the node does not know it."""
        query = self.builder.query("block", Block, params, option.build_suppression())
        data = await self.executor.execute(query)
        return self.codec.decode_value(Block, data.get("block"))

    async def get_blocks(
        self,
        params_list: Sequence[QueryBlockParams],
        option: GetBlockOption = GetBlockOption(),
    ) -> list[Block | None]:
        """Fetch several blocks with a single query, in the order of ``params_list``."""
        if not params_list:
            return []
        query = self.builder.batch("block", Block, params_list, option.build_suppression())
        data = await self.executor.execute(query)
        blocks = [self.codec.decode_value(Block, data.get(f"b{i}")) for i in range(len(params_list))]
        logger.debug("fetched %d of %d blocks", sum(b is not None for b in blocks), len(blocks))
        return blocks

    async def get_block_header(self, params: QueryBlockParams) -> Header | None:
        block = await self.get_block(params)
        if block is None:
            return None
        return block.header

    async def get_transaction(
        self,
        params: QueryTransactionParams,
        option: GetTransactionOption = GetTransactionOption(),
    ) -> Transaction | None:
        query = self.builder.query("transaction", Transaction, params, option.build_suppression())
        data = await self.executor.execute(query)
        return self.codec.decode_value(Transaction, data.get("transaction"))

    async def get_chain(self, option: GetChainOption = GetChainOption()) -> ChainInfo:
        return await self._chain(option.build_suppression())

    async def get_latest_block_height(self) -> int:
        chain = await self._chain(merge(
            keep_only(ChainInfo, "latestBlock"),
            keep_only(Block, "header"),
            keep_only(Header, "height"),
        ))
        return chain.latest_block.header.height

    async def get_latest_block_header(self) -> Header:
        chain = await self._chain(merge(
            keep_only(ChainInfo, "latestBlock"),
            keep_only(Block, "header"),
        ))
        return chain.latest_block.header

    async def _chain(self, suppress: SuppressionRule) -> ChainInfo:
        query = self.builder.query("chain", ChainInfo, suppress=suppress)
        data = await self.executor.execute(query)
        return self.codec.decode_value(ChainInfo, data.get("chain"))
