"""Tests for incident blast request schemas."""

import pytest
from pydantic import ValidationError

from modules.incident_blast.schemas import IncidentBlastRequest, ProviderType, TargetType


@pytest.mark.unit
class TestIncidentBlastRequest:
    def test_defaults(self, blast_request_data):
        request = IncidentBlastRequest(**blast_request_data)

        assert request.target_type == TargetType.ALL
        assert request.provider is None
        assert request.media_path is None

    def test_provider_names(self, blast_request_data):
        assert IncidentBlastRequest(**blast_request_data, provider="notif").provider == (
            ProviderType.NOTIF
        )

        with pytest.raises(ValidationError):
            IncidentBlastRequest(**blast_request_data, provider="telegram")

    def test_department_requires_value(self, blast_request_data):
        with pytest.raises(ValidationError):
            IncidentBlastRequest(**blast_request_data, target_type="department")

    def test_specific_requires_ids(self, blast_request_data):
        with pytest.raises(ValidationError):
            IncidentBlastRequest(**blast_request_data, target_type="specific", employee_ids=[])

    def test_blank_incident_type_rejected(self, blast_request_data):
        with pytest.raises(ValidationError):
            IncidentBlastRequest(**{**blast_request_data, "incident_type": "   "})

    def test_to_incident(self, blast_request_data):
        request = IncidentBlastRequest(
            **{**blast_request_data, "location": " Workshop B "},
            media_path="/objects/uploads/fire.jpg",
        )

        incident = request.to_incident()

        assert incident.location == "Workshop B"
        assert incident.instructions == "Evakuasi ke titik kumpul 2"
        assert incident.media_path == "/objects/uploads/fire.jpg"
