import pytest

from windshield_receipts.core.errors import InvalidJobError
from windshield_receipts.core.models.job import CalibrationType, CustomerType, Job, JobType, Part, Vehicle
from windshield_receipts.core.models.variant import ReceiptVariant
from windshield_receipts.core.services.classifier import (
    classify_job,
    requires_signature,
    shows_calibration_disclaimer,
)


@pytest.mark.parametrize(
    "parts",
    [
        (),
        (("windshield_repair", 80.0),),
        (("windshield_replacement", 300.0), ("door_glass", 150.0)),
    ],
)
def test_dealer_wins_regardless_of_parts(make_job, parts):
    job = make_job(parts=parts, customer_type="dealer")
    assert classify_job(job) is ReceiptVariant.DEALER


def test_plain_string_fields_are_coerced_to_enums():
    job = Job(
        job_number="J-1",
        customer_type="dealer",
        first_name="Ann",
        install_date="2026-01-05",
        vehicles=[Vehicle(parts=[Part(job_type="windshield_replacement", part_total=300.0, calibration_type="declined")])],
    )

    assert job.customer_type is CustomerType.DEALER
    assert job.parts[0].job_type is JobType.WINDSHIELD_REPLACEMENT
    assert job.parts[0].calibration_type is CalibrationType.DECLINED
    variant = classify_job(job)
    assert variant is ReceiptVariant.DEALER
    assert not requires_signature(job, variant)


def test_customer_type_set_after_construction_still_classifies(make_job):
    job = make_job()
    job.customer_type = "fleet"
    assert classify_job(job) is ReceiptVariant.FLEET


def test_unknown_enum_string_is_rejected_at_construction():
    with pytest.raises(InvalidJobError, match="customerType"):
        Job(job_number="J-1", customer_type="wholesale")
    with pytest.raises(InvalidJobError, match="jobType"):
        Part(job_type="windscreen")


def test_fleet_wins_over_part_rules(make_job):
    job = make_job(parts=(("windshield_repair", 80.0),), customer_type="fleet")
    assert classify_job(job) is ReceiptVariant.FLEET


@pytest.mark.parametrize("customer_type", ["retail", "subcontractor"])
def test_single_windshield_repair_is_rock_chip(make_job, customer_type):
    job = make_job(parts=(("windshield_repair", 80.0),), customer_type=customer_type)
    assert classify_job(job) is ReceiptVariant.ROCK_CHIP_REPAIR


def test_repair_with_other_part_is_not_rock_chip(make_job):
    job = make_job(parts=(("windshield_repair", 80.0), ("side_mirror", 90.0)))
    assert classify_job(job) is ReceiptVariant.OTHER_GLASS_REPLACEMENT


def test_single_part_rule_counts_parts_across_vehicles(make_job):
    vehicles = [
        Vehicle(year="2018", make="Ford", model="F-150", parts=[Part(job_type=JobType.WINDSHIELD_REPAIR, part_total=80.0)]),
        Vehicle(year="2020", make="Honda", model="Civic", parts=[Part(job_type=JobType.WINDSHIELD_REPAIR, part_total=80.0)]),
    ]
    job = make_job(vehicles=vehicles)
    assert classify_job(job) is ReceiptVariant.OTHER_GLASS_REPLACEMENT


def test_any_windshield_replacement(make_job):
    job = make_job(parts=(("door_glass", 150.0), ("windshield_replacement", 300.0)))
    assert classify_job(job) is ReceiptVariant.WINDSHIELD_REPLACEMENT


def test_repair_plus_replacement_is_windshield_replacement(make_job):
    job = make_job(parts=(("windshield_repair", 80.0), ("windshield_replacement", 300.0)))
    assert classify_job(job) is ReceiptVariant.WINDSHIELD_REPLACEMENT


def test_no_parts_falls_through_to_other_glass(make_job):
    assert classify_job(make_job(parts=())) is ReceiptVariant.OTHER_GLASS_REPLACEMENT
    assert classify_job(make_job(vehicles=[])) is ReceiptVariant.OTHER_GLASS_REPLACEMENT


def test_unspecified_part_is_other_glass(make_job):
    assert classify_job(make_job(parts=(("unspecified", 50.0),))) is ReceiptVariant.OTHER_GLASS_REPLACEMENT


def test_signature_rule(make_job):
    retail = make_job()
    business = make_job(is_business=True, business_name="Acme Glass")
    dealer = make_job(customer_type="dealer")

    assert requires_signature(retail, classify_job(retail))
    assert not requires_signature(business, classify_job(business))
    assert not requires_signature(dealer, classify_job(dealer))


def test_calibration_disclaimer_only_for_windshield_replacement(make_job):
    replacement = make_job(calibration_declined=True)
    fleet = make_job(calibration_declined=True, customer_type="fleet")
    not_declined = make_job()

    assert shows_calibration_disclaimer(replacement, classify_job(replacement))
    assert not shows_calibration_disclaimer(fleet, classify_job(fleet))
    assert not shows_calibration_disclaimer(not_declined, classify_job(not_declined))


def test_variant_labels():
    assert ReceiptVariant.DEALER.label == "Dealer Invoice"
    assert ReceiptVariant.OTHER_GLASS_REPLACEMENT.label == "Glass Replacement Invoice"
