"""Fuel GraphQL schema types.

Generated by ``fuel-gql generate`` from fuel_gql/schema/fuel.graphqls.
Edit the schema and regenerate instead of changing this file by hand.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from fuel_gql.core.ir import (
    TypeDescriptor,
    TypeRegistry,
    enum,
    input_object,
    record,
    scalar,
    union,
)
from fuel_gql.core.union import TaggedUnion


# =============================================================================
# Enums
# =============================================================================


class ReturnType(str, Enum):
    RETURN = "RETURN"
    RETURN_DATA = "RETURN_DATA"
    REVERT = "REVERT"


class ReceiptType(str, Enum):
    CALL = "CALL"
    RETURN = "RETURN"
    RETURN_DATA = "RETURN_DATA"
    PANIC = "PANIC"
    REVERT = "REVERT"
    LOG = "LOG"
    LOG_DATA = "LOG_DATA"
    TRANSFER = "TRANSFER"
    TRANSFER_OUT = "TRANSFER_OUT"
    SCRIPT_RESULT = "SCRIPT_RESULT"
    MESSAGE_OUT = "MESSAGE_OUT"
    MINT = "MINT"
    BURN = "BURN"


# =============================================================================
# Records
# =============================================================================


@dataclass
class Block:
    id: bytes | None = None
    header: Header | None = None
    consensus: Consensus | None = None
    transactions: list[Transaction] | None = None


@dataclass
class Header:
    id: bytes | None = None
    da_height: int | None = None
    transactions_count: int | None = None
    message_receipt_count: int | None = None
    transactions_root: bytes | None = None
    message_receipt_root: bytes | None = None
    height: int | None = None
    prev_root: bytes | None = None
    time: datetime | None = None
    application_hash: bytes | None = None


@dataclass
class Genesis:
    chain_config_hash: bytes | None = None
    coins_root: bytes | None = None
    contracts_root: bytes | None = None
    messages_root: bytes | None = None


@dataclass
class PoAConsensus:
    signature: bytes | None = None


@dataclass
class Transaction:
    id: bytes | None = None
    input_asset_ids: list[bytes] | None = None
    input_contracts: list[Contract] | None = None
    input_contract: InputContract | None = None
    policies: Policies | None = None
    gas_price: int | None = None
    script_gas_limit: int | None = None
    maturity: int | None = None
    mint_amount: int | None = None
    mint_asset_id: bytes | None = None
    tx_pointer: str | None = None
    is_script: bool | None = None
    is_create: bool | None = None
    is_mint: bool | None = None
    inputs: list[Input] | None = None
    outputs: list[Output] | None = None
    output_contract: ContractOutput | None = None
    witnesses: list[bytes] | None = None
    receipts_root: bytes | None = None
    status: TransactionStatus | None = None
    receipts: list[Receipt] | None = None
    script: bytes | None = None
    script_data: bytes | None = None
    bytecode_witness_index: int | None = None
    bytecode_length: int | None = None
    salt: str | None = None
    storage_slots: list[bytes] | None = None
    raw_payload: bytes | None = None


@dataclass
class Contract:
    id: bytes | None = None
    bytecode: bytes | None = None
    salt: str | None = None


@dataclass
class Policies:
    gas_price: int | None = None
    witness_limit: int | None = None
    maturity: int | None = None
    max_fee: int | None = None


@dataclass
class InputCoin:
    utxo_id: bytes | None = None
    owner: bytes | None = None
    amount: int | None = None
    asset_id: bytes | None = None
    tx_pointer: str | None = None
    witness_index: int | None = None
    maturity: int | None = None
    predicate_gas_used: int | None = None
    predicate: bytes | None = None
    predicate_data: bytes | None = None


@dataclass
class InputContract:
    utxo_id: bytes | None = None
    balance_root: bytes | None = None
    state_root: bytes | None = None
    tx_pointer: str | None = None
    contract: Contract | None = None


@dataclass
class InputMessage:
    sender: bytes | None = None
    recipient: bytes | None = None
    amount: int | None = None
    nonce: str | None = None
    witness_index: int | None = None
    predicate_gas_used: int | None = None
    data: bytes | None = None
    predicate: bytes | None = None
    predicate_data: bytes | None = None


@dataclass
class CoinOutput:
    to: bytes | None = None
    amount: int | None = None
    asset_id: bytes | None = None


@dataclass
class ContractOutput:
    input_index: int | None = None
    balance_root: bytes | None = None
    state_root: bytes | None = None


@dataclass
class ChangeOutput:
    to: bytes | None = None
    amount: int | None = None
    asset_id: bytes | None = None


@dataclass
class VariableOutput:
    to: bytes | None = None
    amount: int | None = None
    asset_id: bytes | None = None


@dataclass
class ContractCreated:
    contract: Contract | None = None
    state_root: bytes | None = None


@dataclass
class SubmittedStatus:
    time: datetime | None = None


@dataclass
class SuccessStatus:
    transaction_id: bytes | None = None
    block: Block | None = None
    time: datetime | None = None
    program_state: ProgramState | None = None
    receipts: list[Receipt] | None = None


@dataclass
class SqueezedOutStatus:
    reason: str | None = None


@dataclass
class FailureStatus:
    transaction_id: bytes | None = None
    block: Block | None = None
    time: datetime | None = None
    reason: str | None = None
    program_state: ProgramState | None = None
    receipts: list[Receipt] | None = None


@dataclass
class ProgramState:
    return_type: ReturnType | None = None
    data: bytes | None = None


@dataclass
class Receipt:
    contract: Contract | None = None
    pc: int | None = None
    is_: int | None = None
    to: Contract | None = None
    to_address: bytes | None = None
    amount: int | None = None
    asset_id: bytes | None = None
    gas: int | None = None
    param1: int | None = None
    param2: int | None = None
    val: int | None = None
    ptr: int | None = None
    digest: bytes | None = None
    reason: int | None = None
    ra: int | None = None
    rb: int | None = None
    rc: int | None = None
    rd: int | None = None
    len: int | None = None
    receipt_type: ReceiptType | None = None
    result: int | None = None
    gas_used: int | None = None
    data: bytes | None = None
    sender: bytes | None = None
    recipient: bytes | None = None
    nonce: str | None = None
    contract_id: bytes | None = None
    sub_id: bytes | None = None


@dataclass
class ChainInfo:
    name: str | None = None
    latest_block: Block | None = None
    da_height: int | None = None
    consensus_parameters: ConsensusParameters | None = None


@dataclass
class ConsensusParameters:
    tx_params: TxParameters | None = None
    predicate_params: PredicateParameters | None = None
    script_params: ScriptParameters | None = None
    contract_params: ContractParameters | None = None
    fee_params: FeeParameters | None = None
    base_asset_id: bytes | None = None
    block_gas_limit: int | None = None
    chain_id: int | None = None
    privileged_address: bytes | None = None


@dataclass
class TxParameters:
    max_inputs: int | None = None
    max_outputs: int | None = None
    max_witnesses: int | None = None
    max_gas_per_tx: int | None = None
    max_size: int | None = None


@dataclass
class PredicateParameters:
    max_predicate_length: int | None = None
    max_predicate_data_length: int | None = None
    max_gas_per_predicate: int | None = None
    max_message_data_length: int | None = None


@dataclass
class ScriptParameters:
    max_script_length: int | None = None
    max_script_data_length: int | None = None


@dataclass
class ContractParameters:
    contract_max_size: int | None = None
    max_storage_slots: int | None = None


@dataclass
class FeeParameters:
    gas_price_factor: int | None = None
    gas_per_byte: int | None = None


# =============================================================================
# Unions
# =============================================================================


class Consensus(TaggedUnion):
    variants = (Genesis, PoAConsensus)


class Input(TaggedUnion):
    variants = (InputCoin, InputContract, InputMessage)


class Output(TaggedUnion):
    variants = (CoinOutput, ContractOutput, ChangeOutput, VariableOutput, ContractCreated)


class TransactionStatus(TaggedUnion):
    variants = (SubmittedStatus, SuccessStatus, SqueezedOutStatus, FailureStatus)


# =============================================================================
# Query parameters
# =============================================================================


@dataclass
class QueryBlockParams:
    id: bytes | None = None
    height: int | None = None


@dataclass
class QueryTransactionParams:
    id: bytes | None = None


# =============================================================================
# Type table
# =============================================================================

SCHEMA = TypeRegistry()

SCHEMA.register_enum("ReturnType", ReturnType)
SCHEMA.register_enum("ReceiptType", ReceiptType)

SCHEMA.register(Block, TypeDescriptor("Block", (
    scalar("id", "BlockId", is_optional=False),
    record("header", "Header", is_optional=False),
    union("consensus", "Consensus", is_optional=False),
    record("transactions", "Transaction", is_list=True, is_optional=False),
)))
SCHEMA.register(Header, TypeDescriptor("Header", (
    scalar("id", "BlockId", is_optional=False),
    scalar("daHeight", "U64", is_optional=False),
    scalar("transactionsCount", "U64", is_optional=False),
    scalar("messageReceiptCount", "U64", is_optional=False),
    scalar("transactionsRoot", "Bytes32", is_optional=False),
    scalar("messageReceiptRoot", "Bytes32", is_optional=False),
    scalar("height", "U32", is_optional=False),
    scalar("prevRoot", "Bytes32", is_optional=False),
    scalar("time", "Tai64Timestamp", is_optional=False),
    scalar("applicationHash", "Bytes32", is_optional=False),
)))
SCHEMA.register(Genesis, TypeDescriptor("Genesis", (
    scalar("chainConfigHash", "Bytes32", is_optional=False),
    scalar("coinsRoot", "Bytes32", is_optional=False),
    scalar("contractsRoot", "Bytes32", is_optional=False),
    scalar("messagesRoot", "Bytes32", is_optional=False),
)))
SCHEMA.register(PoAConsensus, TypeDescriptor("PoAConsensus", (
    scalar("signature", "Signature", is_optional=False),
)))
SCHEMA.register(Transaction, TypeDescriptor("Transaction", (
    scalar("id", "TransactionId", is_optional=False),
    scalar("inputAssetIds", "AssetId", is_list=True),
    record("inputContracts", "Contract", is_list=True),
    record("inputContract", "InputContract"),
    record("policies", "Policies"),
    scalar("gasPrice", "U64"),
    scalar("scriptGasLimit", "U64"),
    scalar("maturity", "U32"),
    scalar("mintAmount", "U64"),
    scalar("mintAssetId", "AssetId"),
    scalar("txPointer", "TxPointer"),
    scalar("isScript", "Boolean", is_optional=False),
    scalar("isCreate", "Boolean", is_optional=False),
    scalar("isMint", "Boolean", is_optional=False),
    union("inputs", "Input", is_list=True),
    union("outputs", "Output", is_list=True, is_optional=False),
    record("outputContract", "ContractOutput"),
    scalar("witnesses", "HexString", is_list=True),
    scalar("receiptsRoot", "Bytes32"),
    union("status", "TransactionStatus"),
    record("receipts", "Receipt", is_list=True),
    scalar("script", "HexString"),
    scalar("scriptData", "HexString"),
    scalar("bytecodeWitnessIndex", "Int"),
    scalar("bytecodeLength", "U64"),
    scalar("salt", "Salt"),
    scalar("storageSlots", "HexString", is_list=True),
    scalar("rawPayload", "HexString", is_optional=False),
)))
SCHEMA.register(Contract, TypeDescriptor("Contract", (
    scalar("id", "ContractId", is_optional=False),
    scalar("bytecode", "HexString", is_optional=False),
    scalar("salt", "Salt", is_optional=False),
)))
SCHEMA.register(Policies, TypeDescriptor("Policies", (
    scalar("gasPrice", "U64"),
    scalar("witnessLimit", "U64"),
    scalar("maturity", "U32"),
    scalar("maxFee", "U64"),
)))
SCHEMA.register(InputCoin, TypeDescriptor("InputCoin", (
    scalar("utxoId", "UtxoId", is_optional=False),
    scalar("owner", "Address", is_optional=False),
    scalar("amount", "U64", is_optional=False),
    scalar("assetId", "AssetId", is_optional=False),
    scalar("txPointer", "TxPointer", is_optional=False),
    scalar("witnessIndex", "Int", is_optional=False),
    scalar("maturity", "U32", is_optional=False),
    scalar("predicateGasUsed", "U64", is_optional=False),
    scalar("predicate", "HexString", is_optional=False),
    scalar("predicateData", "HexString", is_optional=False),
)))
SCHEMA.register(InputContract, TypeDescriptor("InputContract", (
    scalar("utxoId", "UtxoId", is_optional=False),
    scalar("balanceRoot", "Bytes32", is_optional=False),
    scalar("stateRoot", "Bytes32", is_optional=False),
    scalar("txPointer", "TxPointer", is_optional=False),
    record("contract", "Contract", is_optional=False),
)))
SCHEMA.register(InputMessage, TypeDescriptor("InputMessage", (
    scalar("sender", "Address", is_optional=False),
    scalar("recipient", "Address", is_optional=False),
    scalar("amount", "U64", is_optional=False),
    scalar("nonce", "Nonce", is_optional=False),
    scalar("witnessIndex", "Int", is_optional=False),
    scalar("predicateGasUsed", "U64", is_optional=False),
    scalar("data", "HexString", is_optional=False),
    scalar("predicate", "HexString", is_optional=False),
    scalar("predicateData", "HexString", is_optional=False),
)))
SCHEMA.register(CoinOutput, TypeDescriptor("CoinOutput", (
    scalar("to", "Address", is_optional=False),
    scalar("amount", "U64", is_optional=False),
    scalar("assetId", "AssetId", is_optional=False),
)))
SCHEMA.register(ContractOutput, TypeDescriptor("ContractOutput", (
    scalar("inputIndex", "Int", is_optional=False),
    scalar("balanceRoot", "Bytes32", is_optional=False),
    scalar("stateRoot", "Bytes32", is_optional=False),
)))
SCHEMA.register(ChangeOutput, TypeDescriptor("ChangeOutput", (
    scalar("to", "Address", is_optional=False),
    scalar("amount", "U64", is_optional=False),
    scalar("assetId", "AssetId", is_optional=False),
)))
SCHEMA.register(VariableOutput, TypeDescriptor("VariableOutput", (
    scalar("to", "Address", is_optional=False),
    scalar("amount", "U64", is_optional=False),
    scalar("assetId", "AssetId", is_optional=False),
)))
SCHEMA.register(ContractCreated, TypeDescriptor("ContractCreated", (
    record("contract", "Contract", is_optional=False),
    scalar("stateRoot", "Bytes32", is_optional=False),
)))
SCHEMA.register(SubmittedStatus, TypeDescriptor("SubmittedStatus", (
    scalar("time", "Tai64Timestamp", is_optional=False),
)))
SCHEMA.register(SuccessStatus, TypeDescriptor("SuccessStatus", (
    scalar("transactionId", "TransactionId", is_optional=False),
    record("block", "Block", is_optional=False),
    scalar("time", "Tai64Timestamp", is_optional=False),
    record("programState", "ProgramState"),
    record("receipts", "Receipt", is_list=True, is_optional=False),
)))
SCHEMA.register(SqueezedOutStatus, TypeDescriptor("SqueezedOutStatus", (
    scalar("reason", "String", is_optional=False),
)))
SCHEMA.register(FailureStatus, TypeDescriptor("FailureStatus", (
    scalar("transactionId", "TransactionId", is_optional=False),
    record("block", "Block", is_optional=False),
    scalar("time", "Tai64Timestamp", is_optional=False),
    scalar("reason", "String", is_optional=False),
    record("programState", "ProgramState"),
    record("receipts", "Receipt", is_list=True, is_optional=False),
)))
SCHEMA.register(ProgramState, TypeDescriptor("ProgramState", (
    enum("returnType", "ReturnType", is_optional=False),
    scalar("data", "HexString", is_optional=False),
)))
SCHEMA.register(Receipt, TypeDescriptor("Receipt", (
    record("contract", "Contract"),
    scalar("pc", "U64"),
    scalar("is", "U64"),
    record("to", "Contract"),
    scalar("toAddress", "Address"),
    scalar("amount", "U64"),
    scalar("assetId", "AssetId"),
    scalar("gas", "U64"),
    scalar("param1", "U64"),
    scalar("param2", "U64"),
    scalar("val", "U64"),
    scalar("ptr", "U64"),
    scalar("digest", "Bytes32"),
    scalar("reason", "U64"),
    scalar("ra", "U64"),
    scalar("rb", "U64"),
    scalar("rc", "U64"),
    scalar("rd", "U64"),
    scalar("len", "U64"),
    enum("receiptType", "ReceiptType", is_optional=False),
    scalar("result", "U64"),
    scalar("gasUsed", "U64"),
    scalar("data", "HexString"),
    scalar("sender", "Address"),
    scalar("recipient", "Address"),
    scalar("nonce", "Nonce"),
    scalar("contractId", "ContractId"),
    scalar("subId", "Bytes32"),
)))
SCHEMA.register(ChainInfo, TypeDescriptor("ChainInfo", (
    scalar("name", "String", is_optional=False),
    record("latestBlock", "Block", is_optional=False),
    scalar("daHeight", "U64", is_optional=False),
    record("consensusParameters", "ConsensusParameters", is_optional=False),
)))
SCHEMA.register(ConsensusParameters, TypeDescriptor("ConsensusParameters", (
    record("txParams", "TxParameters", is_optional=False),
    record("predicateParams", "PredicateParameters", is_optional=False),
    record("scriptParams", "ScriptParameters", is_optional=False),
    record("contractParams", "ContractParameters", is_optional=False),
    record("feeParams", "FeeParameters", is_optional=False),
    scalar("baseAssetId", "AssetId", is_optional=False),
    scalar("blockGasLimit", "U64", is_optional=False),
    scalar("chainId", "U64", is_optional=False),
    scalar("privilegedAddress", "Address", is_optional=False),
)))
SCHEMA.register(TxParameters, TypeDescriptor("TxParameters", (
    scalar("maxInputs", "U8", is_optional=False),
    scalar("maxOutputs", "U8", is_optional=False),
    scalar("maxWitnesses", "U32", is_optional=False),
    scalar("maxGasPerTx", "U64", is_optional=False),
    scalar("maxSize", "U64", is_optional=False),
)))
SCHEMA.register(PredicateParameters, TypeDescriptor("PredicateParameters", (
    scalar("maxPredicateLength", "U64", is_optional=False),
    scalar("maxPredicateDataLength", "U64", is_optional=False),
    scalar("maxGasPerPredicate", "U64", is_optional=False),
    scalar("maxMessageDataLength", "U64", is_optional=False),
)))
SCHEMA.register(ScriptParameters, TypeDescriptor("ScriptParameters", (
    scalar("maxScriptLength", "U64", is_optional=False),
    scalar("maxScriptDataLength", "U64", is_optional=False),
)))
SCHEMA.register(ContractParameters, TypeDescriptor("ContractParameters", (
    scalar("contractMaxSize", "U64", is_optional=False),
    scalar("maxStorageSlots", "U64", is_optional=False),
)))
SCHEMA.register(FeeParameters, TypeDescriptor("FeeParameters", (
    scalar("gasPriceFactor", "U64", is_optional=False),
    scalar("gasPerByte", "U64", is_optional=False),
)))

SCHEMA.register(Consensus, TypeDescriptor.union("Consensus", (
    "Genesis",
    "PoAConsensus",
)))
SCHEMA.register(Input, TypeDescriptor.union("Input", (
    "InputCoin",
    "InputContract",
    "InputMessage",
)))
SCHEMA.register(Output, TypeDescriptor.union("Output", (
    "CoinOutput",
    "ContractOutput",
    "ChangeOutput",
    "VariableOutput",
    "ContractCreated",
)))
SCHEMA.register(TransactionStatus, TypeDescriptor.union("TransactionStatus", (
    "SubmittedStatus",
    "SuccessStatus",
    "SqueezedOutStatus",
    "FailureStatus",
)))

SCHEMA.register(QueryBlockParams, TypeDescriptor("QueryBlockParams", (
    scalar("id", "BlockId"),
    scalar("height", "U32"),
), is_input=True))
SCHEMA.register(QueryTransactionParams, TypeDescriptor("QueryTransactionParams", (
    scalar("id", "TransactionId", is_optional=False),
), is_input=True))
