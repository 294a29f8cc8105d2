from flask import Flask, jsonify, request

from curl_parser import CurlParseError, parse_curl
from curl_parser.settings import AppSettings, configure_logging
from curl_parser.views import JsonField, RequestPart, build_json_value, error_payload

app = Flask(__name__)
# Field selection order is part of the response.
app.json.sort_keys = False


@app.get("/")
def index():
    return jsonify({
        "service": "curl-parser",
        "endpoints": {
            "POST /parse": "Body: {'curl': '<curl command>', 'part'?: str, 'fields'?: [str]}",
        },
        "parts": [p.value for p in RequestPart],
        "fields": [f.value for f in JsonField],
    })


@app.post("/parse")
def parse():
    payload = request.get_json(force=True, silent=True) or {}
    if not isinstance(payload, dict):
        payload = {}
    curl_cmd = payload.get("curl", "")
    if not isinstance(curl_cmd, str) or not curl_cmd.strip():
        return jsonify(error_payload("invalid_request", "Field 'curl' is required")), 400

    try:
        part = RequestPart(payload["part"]) if payload.get("part") else None
        fields = [JsonField(name) for name in payload.get("fields") or []]
    except (TypeError, ValueError) as e:
        return jsonify(error_payload("invalid_request", f"Unknown part or field: {e}")), 400

    try:
        parsed = parse_curl(curl_cmd)
    except CurlParseError as e:
        app.logger.info("rejected curl command: %s", e)
        return jsonify(error_payload(e.code, str(e))), 400

    try:
        value = build_json_value(parsed, part, fields)
        return jsonify(value), 200
    except (TypeError, ValueError) as e:
        app.logger.exception("could not serialize parsed request")
        return jsonify(error_payload("serialization_error", str(e))), 500


if __name__ == "__main__":
    settings = AppSettings()
    configure_logging(settings.log_level)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)
