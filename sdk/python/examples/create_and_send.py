#!/usr/bin/env python3
"""
Create and send a package with one document and two signers.

Setup:
    1. Create data directory: mkdir -p ~/.esl
    2. Save your API key: echo "<api key>" > ~/.esl/esl.key
    3. Create config.yaml (see below)
    4. Optional: export ESL_DATA=/path/to/other/dir

Example config.yaml:
    base_url: https://sandbox.esignlive.com/api
    timeout: 30

Usage:
    python create_and_send.py contract.pdf
"""

import sys
from datetime import datetime, timedelta, timezone

from esl import (
    DocumentBuilder,
    EslClient,
    FieldBuilder,
    PackageBuilder,
    SignatureBuilder,
    SignerBuilder,
)

# Replace with real recipients
SIGNER1 = "john.smith@example.com"
SIGNER2 = "patty.galant@example.com"


def main():
    if len(sys.argv) != 2:
        print(f"Usage: {sys.argv[0]} <document.pdf>")
        sys.exit(1)

    package = (
        PackageBuilder.new_package_named("Sales contract")
        .described_as("Please review and sign")
        .expires_at(datetime.now(timezone.utc) + timedelta(days=14))
        .with_signer(
            SignerBuilder.new_signer_with_email(SIGNER1)
            .with_first_name("John")
            .with_last_name("Smith")
            .with_custom_id("buyer")
            .build()
        )
        .with_signer(
            SignerBuilder.new_signer_with_email(SIGNER2)
            .with_first_name("Patty")
            .with_last_name("Galant")
            .with_custom_id("seller")
            .build()
        )
        .with_document(
            DocumentBuilder.new_document_named("Contract")
            .from_file(sys.argv[1])
            .with_signature(
                SignatureBuilder.signature_for(SIGNER1)
                .on_page(0)
                .at_position(100, 600)
                .with_field(FieldBuilder.signature_date().on_page(0).at_position(100, 660).build())
                .build()
            )
            .with_signature(
                SignatureBuilder.initials_for(SIGNER2)
                .on_page(0)
                .at_position(400, 600)
                .build()
            )
            .build()
        )
        .build()
    )

    # Connect using config from $ESL_DATA
    with EslClient.from_env() as client:
        package_id = client.create_and_send_package(package)
        print(f"Sent package {package_id}")

        for signer in package.signers.values():
            token = client.create_signer_session_token(package_id, signer.custom_id)
            print(f"Session token for {signer.email}: {token.session_token}")


if __name__ == "__main__":
    main()
