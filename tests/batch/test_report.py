from src.time_entry_engine.time_entry_engine.batch.model import BatchResult, UnitOutcome
from src.time_entry_engine.time_entry_engine.batch.report import format_batch_error_report
from src.time_entry_engine.time_entry_engine.core.enums import UnitState
from src.time_entry_engine.time_entry_engine.core.exceptions import PermanentError


def test_report_for_successful_batch():
    result = BatchResult.from_outcomes(
        [UnitOutcome(index=i, label=f"u{i}", state=UnitState.SUCCEEDED, value=i) for i in range(3)]
    )
    assert format_batch_error_report(result) == "Alle 3 Einträge erfolgreich verarbeitet."


def test_report_lists_failed_units():
    result = BatchResult.from_outcomes(
        [
            UnitOutcome(index=2, label="Erika", state=UnitState.FAILED, error=PermanentError("nicht gefunden")),
            UnitOutcome(index=0, label="Max", state=UnitState.SUCCEEDED, value=1),
            UnitOutcome(index=1, label="Olga", state=UnitState.FAILED, error=RuntimeError("HTTP 500")),
        ]
    )

    assert format_batch_error_report(result) == (
        "1 von 3 Einträgen erfolgreich.\n"
        "\n"
        "Fehler:\n"
        "- Olga: HTTP 500\n"
        "- Erika: nicht gefunden"
    )
