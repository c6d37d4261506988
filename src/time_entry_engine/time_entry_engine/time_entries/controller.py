from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..breaks.model import BreakSegment
from ..common.datetime_utils import parse_iso_datetime
from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/time-entries/calculate", methods=["POST"], endpoint="calculate_time_entry")
    def calculate_time_entry():
        body = request.get_json(silent=True) or {}
        start_iso = body.get("startISO")
        end_iso = body.get("endISO")

        if not start_iso or not end_iso:
            return jsonify({"success": False, "error": "startISO und endISO sind erforderlich"}), 400

        try:
            start = parse_iso_datetime(start_iso)
            end = parse_iso_datetime(end_iso)
            if start >= end:
                return jsonify({"success": False, "error": "Endzeit muss nach Startzeit liegen"}), 400

            override_breaks = bool(body.get("overrideBreaks", False))
            # No breakSegments key: automatic layout even with overrideBreaks; [] means no breaks.
            raw_breaks = body.get("breakSegments")
            if raw_breaks is not None and not isinstance(raw_breaks, list):
                return jsonify({"success": False, "error": "breakSegments muss eine Liste sein"}), 400
            manual_breaks = None if raw_breaks is None else [BreakSegment.from_dict(s) for s in raw_breaks]

            holidays = container.holiday_service.resolve_dates(start.date(), end.date(), body.get("bundesland"))
            result = container.time_entry_computer.compute(
                start_iso,
                end_iso,
                holidays,
                manual_breaks=manual_breaks,
                override_breaks=override_breaks,
            )
        except ValidationError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        except Exception:
            logger.exception("Fehler bei der Zeiteintrag-Berechnung")
            return jsonify({"success": False, "error": "Fehler bei der Berechnung"}), 500

        return jsonify({"success": True, "calculation": result.to_payload(holidays=holidays)}), 200

    @app.route("/api/holidays", methods=["GET"], endpoint="list_holidays")
    def list_holidays():
        start = request.args.get("start", "")
        end = request.args.get("end", start)
        if not start:
            return jsonify({"success": False, "error": "start ist erforderlich"}), 400
        try:
            dates = container.holiday_service.resolve_dates(start, end, request.args.get("bundesland"))
        except ValidationError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        return jsonify({"success": True, "holidays": dates}), 200
