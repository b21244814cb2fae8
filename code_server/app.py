"""Flask application exposing the code endpoints."""

from __future__ import annotations

import json
import logging
import secrets

from flask import Flask, jsonify, request
from flask_cors import CORS
from pydantic import ValidationError

from .config import ServerSettings
from .generator import RandomSourceError, generate
from .schemas import CodeResponse, GeneratedCode, HealthResponse, VerifyCodeRequest
from .store import CodeStore

LOGGER = logging.getLogger(__name__)

STAGE_LABELS = {
    "generate": "Generate",
    "verify": "Verify",
}

EVENT_LABELS = {
    ("generate", "start"): "Generating Code",
    ("generate", "success"): "Issued Code",
    ("verify", "start"): "Verifying Code",
    ("verify", "missing"): "Verification Request Missing Code",
    ("verify", "rejected"): "Code Invalid Or Already Used",
    ("verify", "success"): "Code Verified",
}


def _mask(value: str, visible: int = 3) -> str:
    if len(value) <= visible:
        return "…"
    return f"{value[:visible]}…"


def _build_payload(req: str, **fields: object) -> dict[str, object]:
    payload: dict[str, object] = {"request_id": req}
    for key, value in fields.items():
        if value is None:
            continue
        payload[key] = value
    return payload


def _log(stage: str, event: str, req: str, level: int = logging.INFO, **fields: object) -> None:
    stage_label = STAGE_LABELS.get(stage, stage.title())
    event_label = EVENT_LABELS.get((stage, event), event)
    payload = json.dumps(_build_payload(req, **fields), indent=2, sort_keys=True, ensure_ascii=False)
    message = f"[Code Server: {stage_label}]: {event_label}\n{payload}"
    LOGGER.log(level, message)


def create_app(settings: ServerSettings | None = None, store: CodeStore | None = None) -> Flask:
    settings = settings or ServerSettings()
    code_store = store if store is not None else CodeStore()

    app = Flask(__name__)
    CORS(app, origins=settings.cors_origins)
    logging.basicConfig(level=settings.log_level, format="%(message)s")
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger().setLevel(settings.log_level)
    logging.getLogger("werkzeug").setLevel(logging.WARNING)

    @app.get("/")
    def index():
        return app.response_class("Code server is running", mimetype="text/plain")

    @app.get("/generate-code")
    def generate_code():
        req_id = secrets.token_hex(4)
        _log("generate", "start", req_id)
        code = generate()
        code_store.issue(code)
        _log(
            "generate",
            "success",
            req_id,
            code=_mask(code.value),
            outstanding=len(code_store),
        )
        data = GeneratedCode(code=code.value, created_at=code.created_at)
        return jsonify(
            CodeResponse(
                success=True,
                message="Code generated",
                data=data.model_dump(mode="json"),
            ).model_dump()
        )

    @app.post("/verify-code")
    def verify_code():
        req_id = secrets.token_hex(4)
        _log("verify", "start", req_id)
        try:
            payload = VerifyCodeRequest.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            _log("verify", "missing", req_id, level=logging.WARNING, errors=exc.error_count())
            return jsonify(CodeResponse(success=False, message="Code is required").model_dump()), 400
        if not code_store.redeem(payload.code):
            _log("verify", "rejected", req_id, level=logging.WARNING, code=_mask(payload.code))
            return (
                jsonify(
                    CodeResponse(success=False, message="Invalid or expired code").model_dump()
                ),
                401,
            )
        _log("verify", "success", req_id, code=_mask(payload.code), outstanding=len(code_store))
        return jsonify(CodeResponse(success=True, message="Code verified").model_dump())

    @app.errorhandler(RandomSourceError)
    def handle_random_source_error(error):
        LOGGER.error("Refusing to issue code: %s", error)
        return (
            jsonify(
                CodeResponse(success=False, message="Code generation unavailable").model_dump()
            ),
            500,
        )

    @app.get("/health")
    def health():
        return jsonify(HealthResponse(outstanding_codes=len(code_store)).model_dump())

    return app


app = create_app()
