"""Healthcare command wiring for Keepstore CLI."""

from __future__ import annotations

import argparse
from typing import Any

from cli.output import emit_outcome, emit_rows, finish_mutation
from managers.client import KeepstoreClient
from managers.seed_data import load_seed_file


def add_health_command(subparsers: Any) -> None:
    """Register health subcommand group."""
    parser = subparsers.add_parser("health", help="Patients and prescriptions")
    actions = parser.add_subparsers(dest="action", required=True)
    seed_parser = actions.add_parser("seed", help="Add starter patients and prescriptions")
    seed_parser.add_argument("--file", help="Optional YAML seed file")
    actions.add_parser("patients", help="List all patients")
    prescriptions_parser = actions.add_parser(
        "prescriptions",
        help="List a patient's prescriptions, newest first",
    )
    prescriptions_parser.add_argument("--patient-id", type=int, required=True, help="Patient id")
    patient_parser = actions.add_parser("add-patient", help="Register a patient")
    patient_parser.add_argument("--id", type=int, required=True, help="Patient id")
    patient_parser.add_argument("--name", required=True, help="Full name")
    patient_parser.add_argument("--age", type=int, required=True, help="Age in years")
    patient_parser.add_argument("--gender", required=True, help="Gender")
    prescription_parser = actions.add_parser("add-prescription", help="Issue a prescription")
    prescription_parser.add_argument("--id", type=int, required=True, help="Prescription id")
    prescription_parser.add_argument("--patient-id", type=int, required=True, help="Patient id")
    prescription_parser.add_argument("--medication", required=True, help="Medication name")


def run_health_command(client: KeepstoreClient, args: argparse.Namespace) -> int:
    """Execute one health action."""
    manager, load_outcome = client.healthcare()
    if not load_outcome.ok:
        return emit_outcome(load_outcome)
    autosave = client.config.autosave
    if args.action == "seed":
        seed_data = load_seed_file(args.file) if args.file else None
        return finish_mutation(manager, manager.seed(seed_data), autosave)
    if args.action == "patients":
        emit_rows(
            (patient.id, patient.name, patient.age, patient.gender)
            for patient in manager.list_patients()
        )
        return 0
    if args.action == "prescriptions":
        prescriptions = manager.prescriptions_for(args.patient_id)
        if prescriptions is None:
            print("No prescriptions found for this patient.")
            return 0
        emit_rows(
            (item.id, item.medication_name, item.date_issued.date().isoformat())
            for item in prescriptions
        )
        return 0
    if args.action == "add-patient":
        outcome = manager.add_patient(args.id, args.name, args.age, args.gender)
        return finish_mutation(manager, outcome, autosave)
    outcome = manager.add_prescription(args.id, args.patient_id, args.medication)
    return finish_mutation(manager, outcome, autosave)
