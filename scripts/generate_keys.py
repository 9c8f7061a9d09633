#!/usr/bin/env python3
"""
Generate a Sui Ed25519 signing key.

This script generates:
- Signing key seed, hex encoded (sui.key)
- key_info.json with the public key and address
"""

import argparse
import json
from pathlib import Path

from suitx.crypto.keypair import Ed25519Keypair


def generate_keys(output_dir: str = "./keys") -> dict:
    """
    Generate a new Ed25519 keypair.

    Args:
        output_dir: Directory to save keys

    Returns:
        Dictionary with key info and address
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    keypair = Ed25519Keypair.generate()

    key_path = output_path / "sui.key"
    key_path.write_text(keypair.export_seed().hex() + "\n")
    key_path.chmod(0o600)

    info = {
        "signing_key_path": str(key_path),
        "scheme": keypair.get_key_scheme().value,
        "public_key": keypair.get_public_key().to_base64(),
        "address": keypair.get_public_key().to_sui_address(),
    }

    info_path = output_path / "key_info.json"
    with open(info_path, "w") as f:
        json.dump(info, f, indent=2)

    return info


def main():
    parser = argparse.ArgumentParser(description="Generate a Sui signing key")
    parser.add_argument(
        "--output-dir", "-o",
        default="./keys",
        help="Output directory for keys (default: ./keys)"
    )
    parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Overwrite existing keys"
    )

    args = parser.parse_args()

    output_path = Path(args.output_dir)
    if (output_path / "sui.key").exists() and not args.force:
        print(f"Keys already exist at {args.output_dir}")
        print("   Use --force to overwrite")

        info_path = output_path / "key_info.json"
        if info_path.exists():
            with open(info_path) as f:
                info = json.load(f)
            print(f"\nExisting address: {info['address']}")
        return

    info = generate_keys(args.output_dir)

    print(f"Keys saved to: {args.output_dir}/")
    print("   - sui.key (KEEP SECRET!)")
    print("   - key_info.json")
    print(f"\nAddress: {info['address']}")
    print("\nTo fund on devnet:")
    print(f"   SUI_SIGNING_KEY_PATH={info['signing_key_path']} sui-tx faucet --network devnet")


if __name__ == "__main__":
    main()
