"""Command-line interface for fuel-gql."""

import asyncio
import json
import logging
from pathlib import Path

import click
import httpx

from .client import FuelClient, GetBlockOption, GetChainOption, GetTransactionOption
from .config import ClientConfig
from .core.executor import GraphQLError
from .core.generator import CodeGenerator
from .core.parser import SchemaParser
from .core.query_builder import Layout, QueryBuilder
from .core.structured import to_structured
from .core.suppress import keep_only, merge, suppress_field, suppress_type
from .types import SCHEMA, QueryBlockParams, QueryTransactionParams


def _parse_hash(scalar_name: str, value: str | None) -> bytes | None:
    if value is None:
        return None
    try:
        return SCHEMA.scalars.get(scalar_name).deserialize(value)
    except ValueError as e:
        raise click.BadParameter(f"invalid {scalar_name} {value!r}: {e}")


def _echo_json(registry, value):
    click.echo(json.dumps(to_structured(registry, value), indent=2))


def _run(ctx: click.Context, fetch):
    """Run a client call against the configured endpoint and print the result."""
    config: ClientConfig = ctx.obj["config"]

    async def call():
        async with FuelClient.from_config(config, transport=ctx.obj.get("transport")) as client:
            return await fetch(client)

    try:
        return asyncio.run(call())
    except GraphQLError as e:
        raise click.ClickException(str(e))
    except httpx.HTTPError as e:
        raise click.ClickException(f"request to {config.endpoint} failed: {e}")


@click.group()
@click.version_option(package_name="fuel-gql")
@click.option(
    "--endpoint",
    "-e",
    envvar="FUEL_GRAPHQL_ENDPOINT",
    help="GraphQL endpoint (default: $FUEL_GRAPHQL_ENDPOINT or the Fuel testnet).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging.",
)
@click.pass_context
def main(ctx: click.Context, endpoint: str | None, verbose: bool):
    """Typed client and code generator for the Fuel GraphQL API."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    ctx.ensure_object(dict)
    config = ClientConfig.from_env()
    if endpoint:
        try:
            config = config.model_copy(update={"endpoint": ClientConfig(endpoint=endpoint).endpoint})
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--endpoint")
    ctx.obj["config"] = config


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True),
    help="Path to a GraphQL schema file or a directory of .graphqls files.",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(),
    help="Output file for the generated types module.",
)
@click.option(
    "--template-dir",
    "-t",
    type=click.Path(exists=True, file_okay=False),
    help="Directory with templates overriding the built-in ones.",
)
def generate(schema: str, output: str, template_dir: str | None):
    """Generate the types module from a GraphQL schema.

    Examples:

        fuel-gql generate --schema fuel_gql/schema --output fuel_gql/types.py
    """
    output_path = Path(output).resolve()

    click.echo("Parsing schema...")
    ir = SchemaParser(schema).parse_all()
    click.echo(
        f"  Scalars: {len(ir.scalars)}  Enums: {len(ir.enums)}  Types: {len(ir.types)}  "
        f"Unions: {len(ir.unions)}  Inputs: {len(ir.inputs)}"
    )

    click.echo("Generating code...")
    generator = CodeGenerator(ir, str(output_path), template_dir=template_dir, source=schema)
    try:
        generator.generate()
    except ValueError as e:
        raise click.ClickException(str(e))

    click.echo(f"Done! Generated {output_path}")


@main.command()
@click.argument("root")
@click.option("--pretty", is_flag=True, help="One field per line.")
@click.option(
    "--suppress-type",
    "suppressed_types",
    multiple=True,
    metavar="TYPE",
    help="Never expand TYPE (repeatable).",
)
@click.option(
    "--suppress-field",
    "suppressed_fields",
    multiple=True,
    metavar="TYPE.FIELD",
    help="Leave out one field of one type (repeatable).",
)
@click.option(
    "--keep-only",
    "kept",
    multiple=True,
    metavar="TYPE:FIELD,...",
    help="Keep only the listed fields of TYPE (repeatable).",
)
def selection(root: str, pretty: bool, suppressed_types, suppressed_fields, kept):
    """Print the selection set synthesized for ROOT.

    Examples:

        fuel-gql selection Block --suppress-type Transaction

        fuel-gql selection Header --keep-only Header:id,height --pretty
    """
    if root not in SCHEMA:
        raise click.BadParameter(f"unknown type {root!r}", param_hint="ROOT")
    rules = []
    if suppressed_types:
        rules.append(suppress_type(*suppressed_types))
    for entry in suppressed_fields:
        owner, sep, field_name = entry.partition(".")
        if not sep or not field_name:
            raise click.BadParameter(f"expected TYPE.FIELD, got {entry!r}", param_hint="--suppress-field")
        rules.append(suppress_field(owner, field_name))
    for entry in kept:
        owner, sep, names = entry.partition(":")
        if not sep:
            raise click.BadParameter(f"expected TYPE:FIELD,..., got {entry!r}", param_hint="--keep-only")
        rules.append(keep_only(owner, *[n for n in names.split(",") if n]))

    builder = QueryBuilder(SCHEMA, Layout.PRETTY if pretty else Layout.COMPACT)
    click.echo(builder.selection(root, merge(*rules)), nl=False)
    if not pretty:
        click.echo()


@main.command()
@click.option("--height", type=int, help="Block height.")
@click.option("--id", "block_id", help="Block id (0x-prefixed hex).")
@click.option("--with-transactions", is_flag=True, help="Include the block's transactions.")
@click.option("--with-consensus", is_flag=True, help="Include the consensus data.")
@click.option("--transaction-only-id", is_flag=True, help="Request only the transaction ids.")
@click.pass_context
def block(ctx: click.Context, height, block_id, with_transactions, with_consensus, transaction_only_id):
    """Fetch a block and print it as JSON."""
    if height is None and block_id is None:
        raise click.UsageError("one of --height or --id is required")
    params = QueryBlockParams(id=_parse_hash("BlockId", block_id), height=height)
    option = GetBlockOption(
        with_transactions=with_transactions,
        with_consensus=with_consensus,
        transaction_only_id=transaction_only_id,
    )
    result = _run(ctx, lambda client: client.get_block(params, option))
    if result is None:
        raise click.ClickException("block not found")
    _echo_json(SCHEMA, result)


@main.command()
@click.argument("transaction_id")
@click.option("--with-receipts", is_flag=True, help="Include the receipts.")
@click.option("--with-status", is_flag=True, help="Include the transaction status.")
@click.pass_context
def transaction(ctx: click.Context, transaction_id, with_receipts, with_status):
    """Fetch a transaction by id and print it as JSON."""
    params = QueryTransactionParams(id=_parse_hash("TransactionId", transaction_id))
    option = GetTransactionOption(with_receipts=with_receipts, with_status=with_status)
    result = _run(ctx, lambda client: client.get_transaction(params, option))
    if result is None:
        raise click.ClickException("transaction not found")
    _echo_json(SCHEMA, result)


@main.command()
@click.option("--with-consensus-parameters", is_flag=True, help="Include the consensus parameters.")
@click.option("--height-only", is_flag=True, help="Print only the latest block height.")
@click.pass_context
def chain(ctx: click.Context, with_consensus_parameters, height_only):
    """Print the chain info as JSON."""
    if height_only:
        click.echo(_run(ctx, lambda client: client.get_latest_block_height()))
        return
    option = GetChainOption(with_consensus_parameters=with_consensus_parameters)
    _echo_json(SCHEMA, _run(ctx, lambda client: client.get_chain(option)))


if __name__ == "__main__":
    main()
