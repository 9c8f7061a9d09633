"""
Command-line interface for the Sui transaction client.

Provides commands for inspecting the signer, funding it and submitting
transactions.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Optional

import structlog

from suitx import __version__
from suitx.config import NetworkType, SuiConfig, set_config
from suitx.crypto.keypair import load_keypair_from_config
from suitx.provider.json_rpc import JsonRpcProvider
from suitx.serializer.transactions import TransferSuiTransaction
from suitx.signers.raw_signer import RawSigner
from suitx.types import Base64DataBuffer, ExecuteTransactionRequestType


def setup_logging(level: str = "INFO", json_format: bool = False) -> None:
    """Configure structured logging."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if json_format
            else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper()),
        stream=sys.stderr,
    )


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--network",
        choices=[n.value for n in NetworkType],
        default=None,
        help="Sui network (default: from SUI_NETWORK, else devnet)",
    )
    parser.add_argument(
        "--fullnode-url",
        help="Custom full node JSON-RPC URL",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Output logs in JSON format",
    )


def _add_request_type_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--request-type",
        choices=[r.value for r in ExecuteTransactionRequestType],
        default=ExecuteTransactionRequestType.WAIT_FOR_LOCAL_EXECUTION.value,
        help="Execution confirmation mode (default: WaitForLocalExecution)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sui-tx",
        description="Sign and submit Sui transactions",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    address_parser = subparsers.add_parser("address", help="Print the signer's address")
    _add_common_arguments(address_parser)

    faucet_parser = subparsers.add_parser("faucet", help="Request gas coins from the faucet")
    _add_common_arguments(faucet_parser)
    faucet_parser.add_argument(
        "--faucet-url",
        help="Custom faucet URL",
    )

    execute_parser = subparsers.add_parser("execute", help="Sign and submit serialized transaction bytes")
    _add_common_arguments(execute_parser)
    _add_request_type_argument(execute_parser)
    execute_parser.add_argument(
        "--tx-bytes",
        required=True,
        help="Base64 encoded transaction bytes",
    )

    transfer_parser = subparsers.add_parser("transfer-sui", help="Transfer SUI to an address")
    _add_common_arguments(transfer_parser)
    _add_request_type_argument(transfer_parser)
    transfer_parser.add_argument(
        "--coin",
        required=True,
        help="Object ID of the SUI coin to transfer",
    )
    transfer_parser.add_argument(
        "--recipient",
        required=True,
        help="Recipient address",
    )
    transfer_parser.add_argument(
        "--gas-budget",
        type=int,
        required=True,
        help="Gas budget for the transaction",
    )
    transfer_parser.add_argument(
        "--amount",
        type=int,
        default=None,
        help="Amount to transfer (default: whole coin)",
    )

    return parser


def build_config(args: argparse.Namespace) -> SuiConfig:
    """Build configuration from the environment, overridden by command-line flags."""
    overrides: dict = {}
    if args.network:
        overrides["network"] = NetworkType(args.network)
    if args.fullnode_url:
        overrides["fullnode_url"] = args.fullnode_url
    if getattr(args, "faucet_url", None):
        overrides["faucet_url"] = args.faucet_url
    overrides["log_level"] = args.log_level
    overrides["log_json"] = args.log_json
    return SuiConfig(**overrides)


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, default=str))


async def run_command(args: argparse.Namespace, config: SuiConfig) -> Optional[Any]:
    """Run a signer command and return its JSON-serializable result."""
    keypair = load_keypair_from_config(config)

    if args.command == "address":
        return keypair.get_public_key().to_sui_address()

    async with JsonRpcProvider(config) as provider, RawSigner(keypair, provider) as signer:
        if args.command == "faucet":
            return await signer.request_sui_from_faucet()

        request_type = ExecuteTransactionRequestType(args.request_type)

        if args.command == "execute":
            tx_bytes = Base64DataBuffer.from_base64(args.tx_bytes)
            return await signer.sign_and_execute_transaction(tx_bytes, request_type)

        if args.command == "transfer-sui":
            return await signer.transfer_sui(
                TransferSuiTransaction(
                    sui_object_id=args.coin,
                    gas_budget=args.gas_budget,
                    recipient=args.recipient,
                    amount=args.amount,
                ),
                request_type,
            )

    raise ValueError(f"Unknown command: {args.command}")


def main() -> None:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = build_config(args)
    set_config(config)
    setup_logging(config.log_level, config.log_json)

    try:
        result = asyncio.run(run_command(args, config))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if isinstance(result, str):
        print(result)
    else:
        _print_json(result)


if __name__ == "__main__":
    main()
