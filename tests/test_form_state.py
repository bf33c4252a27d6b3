import asyncio

from landing.form.controller import FormController, SubmissionState
from landing.form.dto import LeadInput
from landing.form.form_schema import CONSULTORIA_VARIANT, LOCADORA_VARIANT
from landing.form.state import (
    consume_widget_reset,
    initialize_session,
    is_submission_pending,
    request_submission,
    run_pending_submission,
)
from landing.form.submission import LeadSubmitter, SubmissionError


class FakeSubmitter(LeadSubmitter):
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.received = []

    async def submit(self, lead, variant):
        self.received.append(lead.to_dict())
        await asyncio.sleep(0)
        if self.fail:
            raise SubmissionError("CRM indisponível")


def _widget_values(**overrides):
    values = {
        "name": "Joana Silva",
        "phone": "11987654321",
        "email": "joana@example.com",
        "company": "Locadora Alfa",
        "location": "São Paulo, SP",
        "equipment": "Andaime",
        "consentGiven": True,
    }
    values.update(overrides)
    return values


def _controller(fail=False):
    submitter = FakeSubmitter(fail=fail)
    controller = FormController(LOCADORA_VARIANT, submitter=submitter, notify=lambda n: None)
    return controller, submitter


def test_initialize_session_creates_buckets():
    session = {}
    initialize_session(session)
    assert session["lead_form_controllers"] == {}
    assert is_submission_pending(session, LOCADORA_VARIANT) is False


def test_request_marks_pending_without_submitting():
    session = {}
    controller, submitter = _controller()

    assert request_submission(session, controller, _widget_values()) is True

    assert is_submission_pending(session, LOCADORA_VARIANT)
    assert not is_submission_pending(session, CONSULTORIA_VARIANT)
    assert submitter.received == []
    assert controller.state is SubmissionState.IDLE
    assert controller.lead.phone == "(11) 98765-4321"


def test_second_request_while_pending_is_ignored():
    session = {}
    controller, submitter = _controller()
    request_submission(session, controller, _widget_values())

    assert request_submission(session, controller, _widget_values(name="Outra")) is False
    assert controller.lead.name == "Joana Silva"

    assert run_pending_submission(session, controller) is SubmissionState.SUCCEEDED
    assert run_pending_submission(session, controller) is None
    assert len(submitter.received) == 1


def test_successful_run_clears_pending_and_requests_widget_reset():
    session = {}
    controller, _ = _controller()
    request_submission(session, controller, _widget_values())

    run_pending_submission(session, controller)

    assert not is_submission_pending(session, LOCADORA_VARIANT)
    assert controller.lead == LeadInput.empty(LOCADORA_VARIANT)
    assert consume_widget_reset(session, LOCADORA_VARIANT) is True
    assert consume_widget_reset(session, LOCADORA_VARIANT) is False


def test_failed_run_keeps_widgets():
    session = {}
    controller, _ = _controller(fail=True)
    request_submission(session, controller, _widget_values())

    assert run_pending_submission(session, controller) is SubmissionState.FAILED
    assert not is_submission_pending(session, LOCADORA_VARIANT)
    assert consume_widget_reset(session, LOCADORA_VARIANT) is False
    assert controller.lead.name == "Joana Silva"


def test_invalid_values_settle_idle_with_errors():
    session = {}
    controller, submitter = _controller()
    request_submission(session, controller, _widget_values(phone=""))

    assert run_pending_submission(session, controller) is SubmissionState.IDLE
    assert controller.lead.phone == ""
    assert "phone" in controller.errors
    assert submitter.received == []
    assert not is_submission_pending(session, LOCADORA_VARIANT)
