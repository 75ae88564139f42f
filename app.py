from __future__ import annotations

from flask import Flask, jsonify, request

from market_mood import MoodAgent, MoodConfig
from market_mood.preferences import PreferenceStore, Preferences
from market_mood.styles import LABEL_STYLES, style_for

app = Flask(__name__)
_config = MoodConfig.from_env()
_agent = MoodAgent(_config)
_preferences = PreferenceStore(_config.preferences_path)


@app.get("/health")
def healthcheck():
    return {"status": "ok"}


@app.get("/mood")
def market_mood():
    query = request.args.get("query")
    try:
        report = _agent.load_today(query=query)
    except Exception as exc:  # pragma: no cover - runtime guard
        app.logger.exception("Uncaught exception when handling /mood")
        return jsonify({"error": "Unexpected server error", "detail": str(exc)}), 500
    payload = report.to_dict()
    for item in payload["headlines"]:
        item["style"] = style_for(item["sentiment_label"])
    payload["styles"] = LABEL_STYLES
    return jsonify(payload)


@app.get("/preferences")
def get_preferences():
    return jsonify({"dark_mode": _preferences.load().dark_mode})


@app.put("/preferences")
def put_preferences():
    payload = request.get_json(silent=True) or {}
    dark_mode = payload.get("dark_mode")
    if not isinstance(dark_mode, bool):
        return jsonify({"error": "`dark_mode` must be a boolean"}), 400
    try:
        _preferences.save(Preferences(dark_mode=dark_mode))
    except OSError as exc:
        app.logger.warning("Could not save preferences: %s", exc)
        return jsonify({"error": "Could not save preferences", "detail": str(exc)}), 500
    return jsonify({"dark_mode": dark_mode})


if __name__ == "__main__":
    app.run(debug=True, host="0.0.0.0", port=8008)
