"""Tests for the fluent builders."""

import io
from datetime import datetime, timedelta, timezone

import pytest

from esl import (
    AttachmentRequirementBuilder,
    CustomFieldBuilder,
    DocumentBuilder,
    DocumentType,
    EslBuilderError,
    FieldBuilder,
    FieldStyle,
    GroupBuilder,
    PackageBuilder,
    PackageId,
    ReminderScheduleBuilder,
    SignatureBuilder,
    SignatureStyle,
    SignerBuilder,
)


class TestSignerBuilder:

    def test_build_with_all_fields(self):
        requirement = (
            AttachmentRequirementBuilder.new_attachment_requirement_with_name("Driver's license")
            .with_description("Please upload a scanned copy of your driver's license.")
            .is_required_attachment()
            .build()
        )
        signer = (
            SignerBuilder.new_signer_with_email("john.smith@example.com")
            .with_first_name("John")
            .with_last_name("Smith")
            .with_company("Acme")
            .with_title("CEO")
            .with_custom_id("signer1Id")
            .signing_order(2)
            .with_email_message("Please sign")
            .deliver_signed_documents_by_email()
            .can_change_signer()
            .with_attachment_requirement(requirement)
            .build()
        )

        assert signer.email == "john.smith@example.com"
        assert signer.first_name == "John"
        assert signer.custom_id == "signer1Id"
        assert signer.signing_order == 2
        assert signer.deliver_signed_documents is True
        assert signer.can_change_signer is True
        assert signer.get_attachment_requirement("Driver's license") is requirement
        assert requirement.required is True
        assert requirement.files == []

    @pytest.mark.parametrize("email", [None, "", "   "])
    def test_missing_email_fails(self, email):
        with pytest.raises(EslBuilderError) as excinfo:
            SignerBuilder.new_signer_with_email(email).with_first_name("John").build()
        assert excinfo.value.field == "signer email"

    def test_duplicate_attachment_requirement_fails(self):
        builder = SignerBuilder.new_signer_with_email("a@example.com")
        for _ in range(2):
            builder.with_attachment_requirement(
                AttachmentRequirementBuilder.new_attachment_requirement_with_name("ID").build()
            )
        with pytest.raises(EslBuilderError):
            builder.build()

    def test_signing_order_must_be_positive(self):
        with pytest.raises(EslBuilderError):
            SignerBuilder.new_signer_with_email("a@example.com").signing_order(0)

    def test_attachment_requirement_needs_name(self):
        with pytest.raises(EslBuilderError) as excinfo:
            AttachmentRequirementBuilder.new_attachment_requirement_with_name("").build()
        assert excinfo.value.field == "attachment requirement name"

    def test_attachment_requirements_keep_order(self):
        builder = SignerBuilder.new_signer_with_email("a@example.com")
        for name in ["Passport", "Bank statement", "Utility bill"]:
            builder.with_attachment_requirement(
                AttachmentRequirementBuilder.new_attachment_requirement_with_name(name).build()
            )
        signer = builder.build()
        assert list(signer.attachment_requirements) == ["Passport", "Bank statement", "Utility bill"]


class TestSignatureAndFieldBuilders:

    def test_signature_styles(self):
        assert SignatureBuilder.signature_for("a@x.com").build().style == SignatureStyle.FULL_NAME
        assert SignatureBuilder.initials_for("a@x.com").build().style == SignatureStyle.INITIALS
        assert SignatureBuilder.capture_for("a@x.com").build().style == SignatureStyle.HAND_DRAWN

    def test_signature_with_fields(self):
        date_field = FieldBuilder.signature_date().on_page(0).at_position(100, 220).build()
        signature = (
            SignatureBuilder.signature_for("a@x.com")
            .on_page(1)
            .at_position(100, 200)
            .with_size(250, 60)
            .make_optional()
            .with_field(date_field)
            .build()
        )
        assert signature.page == 1
        assert (signature.x, signature.y, signature.width, signature.height) == (100, 200, 250, 60)
        assert signature.optional is True
        assert signature.fields == [date_field]
        assert date_field.style == FieldStyle.SIGNATURE_DATE

    def test_signature_needs_signer(self):
        with pytest.raises(EslBuilderError):
            SignatureBuilder.signature_for("").build()

    def test_negative_page_rejected(self):
        with pytest.raises(EslBuilderError):
            SignatureBuilder.signature_for("a@x.com").on_page(-1).build()
        with pytest.raises(EslBuilderError):
            FieldBuilder.text_field().on_page(-1).build()


class TestDocumentBuilder:

    def test_from_stream(self):
        document = (
            DocumentBuilder.new_document_named("test document")
            .from_stream(io.BytesIO(b"%PDF-1.4"), DocumentType.PDF)
            .with_signature(SignatureBuilder.signature_for("a@x.com").build())
            .build()
        )
        assert document.content == b"%PDF-1.4"
        assert document.file_name == "test document.pdf"
        assert len(document.signatures) == 1

    def test_from_file(self, tmp_path):
        path = tmp_path / "contract.pdf"
        path.write_bytes(b"%PDF-1.4 contract")
        document = DocumentBuilder.new_document_named("contract").from_file(str(path)).build()
        assert document.file_name == "contract.pdf"
        assert document.document_type == DocumentType.PDF
        assert document.content == b"%PDF-1.4 contract"

    def test_from_file_unsupported_extension(self, tmp_path):
        path = tmp_path / "image.png"
        path.write_bytes(b"\x89PNG")
        with pytest.raises(EslBuilderError):
            DocumentBuilder.new_document_named("image").from_file(str(path))

    def test_document_needs_name(self):
        with pytest.raises(EslBuilderError):
            DocumentBuilder.new_document_named("").build()


class TestPackageBuilder:

    def test_build(self):
        signer = SignerBuilder.new_signer_with_email("a@x.com").build()
        document = DocumentBuilder.new_document_named("doc").build()
        expiry = datetime(2030, 1, 2, 3, 4, 5, 678, tzinfo=timezone(timedelta(hours=-5)))

        package = (
            PackageBuilder.new_package_named("Contract")
            .described_as("A contract")
            .with_email_message("Hello")
            .with_language("fr_ca")
            .expires_at(expiry)
            .without_autocomplete()
            .with_signer(signer)
            .with_document(document)
            .build()
        )

        assert package.name == "Contract"
        assert package.description == "A contract"
        assert package.language == "fr-CA"
        assert package.expiry_date == datetime(2030, 1, 2, 8, 4, 5, tzinfo=timezone.utc)
        assert package.autocomplete is False
        assert package.get_signer("a@x.com") is signer
        assert package.get_document("doc") is document

    def test_missing_name_fails(self):
        with pytest.raises(EslBuilderError) as excinfo:
            PackageBuilder.new_package_named("").build()
        assert excinfo.value.field == "package name"

    def test_duplicate_signer_fails(self):
        builder = PackageBuilder.new_package_named("p")
        builder.with_signer(SignerBuilder.new_signer_with_email("a@x.com").build())
        builder.with_signer(SignerBuilder.new_signer_with_email("a@x.com").build())
        with pytest.raises(EslBuilderError):
            builder.build()

    def test_duplicate_document_fails(self):
        builder = PackageBuilder.new_package_named("p")
        builder.with_document(DocumentBuilder.new_document_named("doc").build())
        builder.with_document(DocumentBuilder.new_document_named("doc").build())
        with pytest.raises(EslBuilderError):
            builder.build()

    def test_duplicate_custom_id_fails(self):
        builder = PackageBuilder.new_package_named("p")
        builder.with_signer(SignerBuilder.new_signer_with_email("a@x.com").with_custom_id("buyer").build())
        builder.with_signer(SignerBuilder.new_signer_with_email("b@x.com").with_custom_id("buyer").build())
        with pytest.raises(EslBuilderError) as excinfo:
            builder.build()
        assert excinfo.value.field == "signer custom id"

    def test_custom_id_taking_another_signers_generated_id_fails(self):
        builder = PackageBuilder.new_package_named("p")
        builder.with_signer(SignerBuilder.new_signer_with_email("a@x.com").with_custom_id("signer2").build())
        builder.with_signer(SignerBuilder.new_signer_with_email("b@x.com").build())
        with pytest.raises(EslBuilderError) as excinfo:
            builder.build()
        assert excinfo.value.field == "signer custom id"

    def test_custom_id_equal_to_own_generated_id_fails(self):
        builder = PackageBuilder.new_package_named("p")
        builder.with_signer(SignerBuilder.new_signer_with_email("a@x.com").with_custom_id("signer1").build())
        with pytest.raises(EslBuilderError):
            builder.build()

    def test_unrelated_positional_looking_custom_id_is_allowed(self):
        package = (
            PackageBuilder.new_package_named("p")
            .with_signer(SignerBuilder.new_signer_with_email("a@x.com").with_custom_id("signer3").build())
            .with_signer(SignerBuilder.new_signer_with_email("b@x.com").with_custom_id("signer1").build())
            .build()
        )
        assert [s.custom_id for s in package.signers.values()] == ["signer3", "signer1"]

    def test_from_package_copies(self):
        original = (
            PackageBuilder.new_package_named("p")
            .with_signer(SignerBuilder.new_signer_with_email("a@x.com").build())
            .build()
        )
        updated = (
            PackageBuilder.from_package(original)
            .described_as("changed")
            .with_signer(SignerBuilder.new_signer_with_email("b@x.com").build())
            .build()
        )
        assert original.description is None
        assert list(original.signers) == ["a@x.com"]
        assert list(updated.signers) == ["a@x.com", "b@x.com"]

    def test_builder_failure_makes_no_request(self, stub_client, stub_session):
        with pytest.raises(EslBuilderError):
            stub_client.create_package(
                PackageBuilder.new_package_named("p")
                .with_signer(SignerBuilder.new_signer_with_email("").build())
                .build()
            )
        assert stub_session.requests == []


class TestAccountBuilders:

    def test_reminder_schedule(self):
        schedule = (
            ReminderScheduleBuilder.for_package_with_id(PackageId("pkg1"))
            .with_days_until_first_reminder(2)
            .with_days_between_reminders(3)
            .with_number_of_repetitions(4)
            .build()
        )
        assert schedule.days_until_first_reminder == 2
        assert schedule.days_between_reminders == 3
        assert schedule.number_of_repetitions == 4

    def test_reminder_schedule_rejects_zero_interval(self):
        with pytest.raises(EslBuilderError):
            ReminderScheduleBuilder.for_package_with_id(PackageId("pkg1")).with_days_between_reminders(0).build()

    def test_group(self):
        group = (
            GroupBuilder.new_group("Signers")
            .with_email("group@x.com")
            .with_member("a@x.com", "Ann", "Lee")
            .build()
        )
        assert group.members[0].email == "a@x.com"
        assert group.members[0].member_type == "REGULAR"

    def test_custom_field_needs_translation(self):
        with pytest.raises(EslBuilderError):
            CustomFieldBuilder.custom_field_with_id("cf1").build()

        custom_field = (
            CustomFieldBuilder.custom_field_with_id("cf1")
            .with_default_value("x")
            .with_translation("EN", "Employee id")
            .build()
        )
        assert custom_field.translations[0].language == "en"
