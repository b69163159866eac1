from whiteboard_tutor.services.ai_worker import AITask
from whiteboard_tutor.services.gemini_service import HintGenerationError


def run_task(task):
    outcome = {}
    task.signals.succeeded.connect(lambda op, result, elapsed: outcome.update(ok=(op, result)))
    task.signals.failed.connect(lambda op, message: outcome.update(failed=(op, message)))
    task.run()
    return outcome


def test_success_reports_result(qapp):
    outcome = run_task(AITask("question", lambda subject, level: f"{subject}-{level}", "Maths", 9))
    assert outcome == {"ok": ("question", "Maths-9")}


def test_service_error_message_passed_through(qapp):
    def fail(question):
        raise HintGenerationError("Failed to generate hint. Please try again.")

    outcome = run_task(AITask("hint", fail, "Solve"))
    assert outcome == {"failed": ("hint", "Failed to generate hint. Please try again.")}


def test_unexpected_error_reported(qapp):
    def fail():
        raise KeyError("x")

    outcome = run_task(AITask("verify", fail))
    assert outcome["failed"][0] == "verify"
    assert outcome["failed"][1].startswith("Unexpected error")
