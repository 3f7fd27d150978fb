"""Patient and prescription manager.

This module keeps patients and prescriptions in separate repositories and
maintains a per-patient prescription map ordered newest-first.
"""

from __future__ import annotations

from datetime import datetime

from core.errors import EntityNotFoundError, InvalidValueError, KeepstoreError
from core.logging_config import get_logger
from core.types import OperationOutcome, Patient, Prescription, SeedData
from managers.outcomes import (
    SnapshotBinding,
    failed,
    flush_snapshots,
    succeeded,
    with_flush_error,
)
from managers.seed_data import default_seed_data
from store.derived_index import DerivedIndex, chronological_key
from store.record_payload import PATIENT_CODEC, PRESCRIPTION_CODEC
from store.repository import Repository, replace_all_together
from store.snapshot_io import JsonSnapshotFile, SnapshotTarget

_LOGGER = get_logger(__name__)


class HealthcareManager:
    """Health records manager with a prescription-by-patient index."""

    def __init__(
        self,
        patients_target: SnapshotTarget,
        prescriptions_target: SnapshotTarget,
        autosave: bool = True,
    ) -> None:
        """Create a manager bound to two snapshot locations.

        Args:
            patients_target: Snapshot location for patients.
            prescriptions_target: Snapshot location for prescriptions.
            autosave: Flush snapshots after each applied verb.
        """
        self._patients: Repository[Patient] = Repository("patient")
        self._prescriptions: Repository[Prescription] = Repository("prescription")
        self._prescription_map: DerivedIndex[int, Prescription] = DerivedIndex(
            group_key_of=lambda prescription: prescription.patient_id,
            sort_key_of=lambda prescription: chronological_key(prescription.date_issued),
            descending=True,
        )
        self._patients_file = JsonSnapshotFile(patients_target, PATIENT_CODEC)
        self._prescriptions_file = JsonSnapshotFile(prescriptions_target, PRESCRIPTION_CODEC)
        self._bindings: list[SnapshotBinding] = [
            (self._patients_file, self._patients),
            (self._prescriptions_file, self._prescriptions),
        ]
        self._autosave = autosave

    @property
    def patients(self) -> Repository[Patient]:
        return self._patients

    @property
    def prescriptions(self) -> Repository[Prescription]:
        return self._prescriptions

    def seed(
        self,
        seed_data: SeedData | None = None,
        now: datetime | None = None,
    ) -> OperationOutcome:
        """Add starter patients and prescriptions, then rebuild the map.

        Prescriptions must reference a patient that is already registered or
        appears earlier in the seed data.
        """
        data = seed_data or default_seed_data(now)
        try:
            for patient in data.patients:
                self._patients.add(patient)
            for prescription in data.prescriptions:
                if prescription.patient_id not in self._patients:
                    raise EntityNotFoundError(
                        f"Seed prescription {prescription.id} references patient "
                        f"{prescription.patient_id}, which does not exist."
                    )
                self._prescriptions.add(prescription)
        except KeepstoreError as error:
            self.build_prescription_map()
            return failed("healthcare_seed", error)
        self.build_prescription_map()
        _LOGGER.info(
            "healthcare_seeded",
            patient_count=len(data.patients),
            prescription_count=len(data.prescriptions),
        )
        message = (
            f"Seeded {len(data.patients)} patients and {len(data.prescriptions)} prescriptions."
        )
        return self._after_change(succeeded(message))

    def build_prescription_map(self) -> None:
        """Regroup prescriptions by patient from the current repository snapshot."""
        self._prescription_map.rebuild(self._prescriptions.get_all())

    def list_patients(self) -> list[Patient]:
        """Return all patients ordered by id."""
        return sorted(self._patients.get_all(), key=lambda patient: patient.id)

    def prescriptions_for(self, patient_id: int) -> tuple[Prescription, ...] | None:
        """Return a patient's prescriptions newest-first, or None when there are none."""
        return self._prescription_map.lookup(patient_id)

    def add_patient(self, patient_id: int, name: str, age: int, gender: str) -> OperationOutcome:
        """Register a new patient.

        Returns:
            Outcome carrying the stored patient on success.
        """
        try:
            if not name.strip():
                raise InvalidValueError("Patient name cannot be empty.")
            if age < 0:
                raise InvalidValueError(f"Patient age cannot be negative (got {age}).")
            patient = Patient(id=patient_id, name=name.strip(), age=age, gender=gender.strip())
            self._patients.add(patient)
        except KeepstoreError as error:
            return failed("add_patient", error, patient_id=patient_id)
        _LOGGER.info("patient_added", patient_id=patient_id)
        return self._after_change(succeeded("Patient added.", value=patient))

    def add_prescription(
        self,
        prescription_id: int,
        patient_id: int,
        medication_name: str,
        date_issued: datetime | None = None,
    ) -> OperationOutcome:
        """Issue a prescription to an existing patient and rebuild the map.

        Args:
            prescription_id: New prescription identifier.
            patient_id: Receiving patient; must already be registered.
            medication_name: Medication to prescribe.
            date_issued: Issue time; current time when omitted.

        Returns:
            Outcome carrying the stored prescription on success.
        """
        try:
            if not medication_name.strip():
                raise InvalidValueError("Medication name cannot be empty.")
            if patient_id not in self._patients:
                raise EntityNotFoundError(
                    f"Patient with ID {patient_id} not found. Add the patient first."
                )
            prescription = Prescription(
                id=prescription_id,
                patient_id=patient_id,
                medication_name=medication_name.strip(),
                date_issued=date_issued or datetime.now(),
            )
            self._prescriptions.add(prescription)
        except KeepstoreError as error:
            return failed(
                "add_prescription",
                error,
                prescription_id=prescription_id,
                patient_id=patient_id,
            )
        self.build_prescription_map()
        _LOGGER.info(
            "prescription_added",
            prescription_id=prescription_id,
            patient_id=patient_id,
        )
        return self._after_change(succeeded("Prescription added.", value=prescription))

    def save(self) -> OperationOutcome:
        """Flush patient and prescription snapshots."""
        flush_error = flush_snapshots(self._bindings)
        if flush_error is not None:
            return OperationOutcome(ok=False, message=str(flush_error), error=flush_error)
        return succeeded("Health data saved.")

    def load(self) -> OperationOutcome:
        """Replace both repositories with their snapshots and rebuild the map."""
        try:
            patients = self._patients_file.load()
            prescriptions = self._prescriptions_file.load()
            replace_all_together(
                [(self._patients, patients), (self._prescriptions, prescriptions)]
            )
        except KeepstoreError as error:
            return failed("healthcare_load", error)
        self.build_prescription_map()
        return succeeded(
            f"Loaded {len(patients)} patients and {len(prescriptions)} prescriptions."
        )

    def _after_change(self, outcome: OperationOutcome) -> OperationOutcome:
        if not self._autosave:
            return outcome
        return with_flush_error(outcome, flush_snapshots(self._bindings))
