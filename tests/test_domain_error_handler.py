"""Tests for domain error handler to verify structured JSON error responses."""
import json

import pytest
from datetime import datetime, timedelta
from fastapi.responses import JSONResponse

from app.core.error_handlers import domain_error_handler, ERROR_STATUS_MAP
from app.core.exceptions import (
    BusinessRuleError,
    DomainError,
    GenerationError,
    IncompleteBlockError,
    NotFoundError,
    UnknownTrackKindError,
    ValidationError,
)


class MockRequest:
    """Mock FastAPI Request object for testing."""
    
    def __init__(self, request_id: str = "test-request-123"):
        self.state = type('State', (), {'request_id': request_id})()


class TestDomainErrorExceptions:
    """Test domain exception classes and their error codes."""
    
    def test_domain_error_base(self):
        error = DomainError(
            code="TEST_001",
            message="Test error message",
            details={"key": "value"}
        )
        
        assert error.code == "TEST_001"
        assert error.message == "Test error message"
        assert error.details == {"key": "value"}
        assert str(error) == "Test error message"
    
    def test_not_found_error(self):
        """Test NotFoundError generates correct error code."""
        error = NotFoundError("track", "Track compete not found", {"track": "compete", "stage": "template"})
        
        assert error.code == "NF_TRACK_001"
        assert error.message == "Track compete not found"
        assert error.details == {"track": "compete", "stage": "template"}
    
    def test_not_found_error_default_message(self):
        error = NotFoundError("session")
        
        assert error.code == "NF_SESSION_001"
        assert error.message == "session not found"
        assert error.details == {}
    
    def test_validation_error(self):
        """Test ValidationError generates correct error code."""
        error = ValidationError("start_week", "must be >= 1")
        
        assert error.code == "VAL_START_WEEK_001"
        assert error.message == "Validation failed for start_week: must be >= 1"
        assert error.details == {"field": "start_week"}
    
    def test_business_rule_error_default(self):
        error = BusinessRuleError("Track is archived")
        
        assert error.code == "BR_001"
        assert error.details == {}

    def test_unknown_track_kind_error(self):
        error = UnknownTrackKindError("crossfit-kids")

        assert isinstance(error, BusinessRuleError)
        assert error.code == "BR_UNKNOWN_TRACK_KIND"
        assert error.slug == "crossfit-kids"
        assert error.details == {"track": "crossfit-kids", "stage": "template"}

    def test_generation_error_carries_track_and_stage(self):
        error = GenerationError(
            "compete",
            "persistence",
            "Failed to replace session",
            details={"week": 3, "day": 2},
        )

        assert error.code == "GEN_001"
        assert error.track == "compete"
        assert error.stage == "persistence"
        assert error.details == {"track": "compete", "stage": "persistence", "week": 3, "day": 2}

    def test_incomplete_block_error(self):
        error = IncompleteBlockError("build", "General Conditioning", {"week": 1, "day": 4})

        assert isinstance(error, GenerationError)
        assert error.code == "GEN_EMPTY_BLOCK"
        assert error.stage == "persistence"
        assert error.details["block"] == "General Conditioning"
        assert error.details["week"] == 1
        assert "General Conditioning" in error.message


class TestErrorStatusMap:
    """Test ERROR_STATUS_MAP mapping."""
    
    def test_status_map_complete(self):
        """Verify all domain errors have status codes mapped."""
        for error_type in (
            NotFoundError,
            ValidationError,
            BusinessRuleError,
            UnknownTrackKindError,
            GenerationError,
            IncompleteBlockError,
        ):
            assert error_type in ERROR_STATUS_MAP
    
    def test_not_found_status(self):
        assert ERROR_STATUS_MAP[NotFoundError] == 404
    
    def test_validation_status(self):
        assert ERROR_STATUS_MAP[ValidationError] == 400
    
    def test_unknown_track_status(self):
        assert ERROR_STATUS_MAP[UnknownTrackKindError] == 422

    def test_generation_status(self):
        assert ERROR_STATUS_MAP[GenerationError] == 503


class TestDomainErrorHandler:
    """Test domain_error_handler function."""
    
    @pytest.mark.asyncio
    async def test_not_found_error_response(self):
        """Test NotFoundError returns 404 with structured JSON."""
        error = NotFoundError("track", "Track endure not found", {"track": "endure", "stage": "template"})
        request = MockRequest(request_id="req-123")
        
        response = await domain_error_handler(request, error)
        
        assert isinstance(response, JSONResponse)
        assert response.status_code == 404
        
        data = json.loads(response.body.decode())
        
        assert data["data"] is None
        assert len(data["errors"]) == 1
        
        error_dict = data["errors"][0]
        assert error_dict["code"] == "NF_TRACK_001"
        assert error_dict["message"] == "Track endure not found"
        assert error_dict["details"] == {"track": "endure", "stage": "template"}
    
    @pytest.mark.asyncio
    async def test_unknown_track_response(self):
        error = UnknownTrackKindError("pilates")
        
        response = await domain_error_handler(MockRequest(), error)
        
        assert response.status_code == 422
        data = json.loads(response.body.decode())
        assert data["errors"][0]["code"] == "BR_UNKNOWN_TRACK_KIND"
        assert data["errors"][0]["details"]["track"] == "pilates"

    @pytest.mark.asyncio
    async def test_generation_error_response(self):
        """GenerationError details name the track, stage, week and day to retry."""
        error = GenerationError(
            "endure",
            "persistence",
            "Failed to replace session for week 2 day 3",
            details={"week": 2, "day": 3},
        )
        
        response = await domain_error_handler(MockRequest(), error)
        
        assert response.status_code == 503
        details = json.loads(response.body.decode())["errors"][0]["details"]
        assert details == {"track": "endure", "stage": "persistence", "week": 2, "day": 3}

    @pytest.mark.asyncio
    async def test_incomplete_block_response(self):
        error = IncompleteBlockError("build", "General Conditioning")

        response = await domain_error_handler(MockRequest(), error)

        assert response.status_code == 500
        assert json.loads(response.body.decode())["errors"][0]["code"] == "GEN_EMPTY_BLOCK"
    
    @pytest.mark.asyncio
    async def test_response_includes_metadata(self):
        """Test error response includes request_id and timestamp."""
        error = NotFoundError("test_entity")
        request = MockRequest(request_id="test-request-id-12345")
        
        response = await domain_error_handler(request, error)
        
        data = json.loads(response.body.decode())
        
        assert data["meta"]["request_id"] == "test-request-id-12345"
        
        timestamp = datetime.fromisoformat(data["meta"]["timestamp"])
        assert timestamp.utcoffset() == timedelta(0)
    
    @pytest.mark.asyncio
    async def test_unknown_domain_error_returns_500(self):
        """Test unknown DomainError subclass returns 500."""
        
        class CustomDomainError(DomainError):
            pass
        
        error = CustomDomainError("CUSTOM_001", "Custom error message")
        
        response = await domain_error_handler(MockRequest(request_id="req-custom"), error)
        
        assert response.status_code == 500  # Default for unmapped errors
        
        error_dict = json.loads(response.body.decode())["errors"][0]
        assert error_dict["code"] == "CUSTOM_001"
        assert error_dict["message"] == "Custom error message"
    
    @pytest.mark.asyncio
    async def test_error_with_none_request_id(self):
        """Test error response when request has no request_id."""
        error = ValidationError("week_count", "must be >= 1")
        
        # Create a mock request without request_id in state
        request = type('Request', (), {
            'state': type('State', (), {})()
        })()
        
        response = await domain_error_handler(request, error)
        
        data = json.loads(response.body.decode())
        
        assert data["meta"]["request_id"] is None
