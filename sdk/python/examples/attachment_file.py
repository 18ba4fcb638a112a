#!/usr/bin/env python3
"""
Attachment requirement example - upload and delete files as a signer.

A signer is asked for a driver's license. Two files are uploaded on their
behalf, one is deleted again, and once the package is complete the server
refuses further deletes.

Uses the same ~/.esl data directory as create_and_send.py.

Usage:
    python attachment_file.py contract.pdf license-front.pdf license-back.pdf
"""

import os
import sys

from esl import (
    AttachmentRequirementBuilder,
    DocumentBuilder,
    EslClient,
    EslServerError,
    PackageBuilder,
    SignatureBuilder,
    SignerBuilder,
)

SIGNER = "john.smith@example.com"
SIGNER_ID = "signer1Id"
REQUIREMENT = "Driver's license"
COMPLETED_DELETE_KEY = "error.validation.attachments.delete.completedTransaction"


def read_file(path):
    with open(path, "rb") as f:
        return f.read()


def attachment_files(client, package_id):
    """Files currently uploaded against the requirement (fresh fetch)."""
    package = client.get_package(package_id)
    return package.get_signer(SIGNER).get_attachment_requirement(REQUIREMENT).files


def main():
    if len(sys.argv) != 4:
        print(f"Usage: {sys.argv[0]} <document.pdf> <attachment1> <attachment2>")
        sys.exit(1)
    document_path, *attachment_paths = sys.argv[1:]

    package = (
        PackageBuilder.new_package_named("Attachment example")
        .with_signer(
            SignerBuilder.new_signer_with_email(SIGNER)
            .with_first_name("John")
            .with_last_name("Smith")
            .with_custom_id(SIGNER_ID)
            .with_attachment_requirement(
                AttachmentRequirementBuilder.new_attachment_requirement_with_name(REQUIREMENT)
                .with_description("Please upload a scanned copy of your driver's license.")
                .is_required_attachment()
                .build()
            )
            .build()
        )
        .with_document(
            DocumentBuilder.new_document_named("Contract")
            .from_file(document_path)
            .with_signature(SignatureBuilder.signature_for(SIGNER).on_page(0).at_position(100, 100).build())
            .build()
        )
        .build()
    )

    with EslClient.from_env() as client:
        package_id = client.create_and_send_package(package)
        print(f"Sent package {package_id}")

        requirement = client.get_package(package_id).get_signer(SIGNER).get_attachment_requirement(REQUIREMENT)

        for path in attachment_paths:
            client.upload_attachment(package_id, requirement.id, os.path.basename(path), read_file(path), SIGNER_ID)
        files = attachment_files(client, package_id)
        print(f"Uploaded: {[f.name for f in files]}")

        client.delete_attachment_file(package_id, requirement.id, files[0].id, SIGNER_ID)
        files = attachment_files(client, package_id)
        print(f"After delete: {[f.name for f in files]}")

        # Sign on behalf of the sender, then complete the package
        client.sign_documents(package_id)
        client.mark_complete(package_id)

        try:
            client.delete_attachment_file(package_id, requirement.id, files[0].id, SIGNER_ID)
        except EslServerError as e:
            if e.message_key != COMPLETED_DELETE_KEY:
                raise
            print(f"Delete refused after completion: {e}")


if __name__ == "__main__":
    main()
