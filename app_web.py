"""HTTP + Socket.IO server for the browser version of the game."""
import logging

from flask import Flask, jsonify, request
from flask_socketio import SocketIO, emit

from config import load_settings
from feedback import feedback_payload, header_payload, suggestion_payload
from game import GuessStatus
from session import GameSession

logger = logging.getLogger(__name__)

GUESS_ERRORS = {
    GuessStatus.UNRESOLVED: "No matching character — please choose from the suggestions.",
    GuessStatus.ROUND_OVER: "Round is over, start a new round.",
    GuessStatus.EMPTY: "No guess provided",
    GuessStatus.NO_ROUND: "No characters loaded.",
}


def as_dict(data):
    """Request or event payload as a dict; anything else counts as empty."""
    return data if isinstance(data, dict) else {}


def text_field(data, key):
    value = as_dict(data).get(key)
    return value if isinstance(value, str) else ""


def create_app(settings=None, session=None):
    settings = settings or load_settings()
    app = Flask(__name__)
    app.config["SECRET_KEY"] = settings.secret_key
    socketio = SocketIO(app, cors_allowed_origins="*")

    game_session = session or GameSession.from_settings(settings)
    game_session.new_round()
    app.extensions["game_session"] = game_session

    # ---------------------- payload helpers ----------------------
    def round_payload():
        if game_session.round is None:
            return {"message": "No characters loaded.", **game_session.status()}
        return {"message": "New round started. Make a guess!", **game_session.status()}

    def guess_payload(outcome):
        result = {
            "status": outcome.status.value,
            "feedback": feedback_payload(outcome.guess, outcome.row),
            "incorrect_guesses": outcome.state.incorrect_guesses,
            "letter_hint": game_session.letter_hint,
        }
        if outcome.status is GuessStatus.WON:
            result["winner"] = True
            result["message"] = f"Correct — it's {outcome.state.secret.name}!"
        else:
            result["message"] = "Incorrect."
        return result

    def reveal_payload(row):
        secret = game_session.round.secret
        return {
            "message": f"Revealed — it's {secret.name}!",
            "feedback": feedback_payload(secret, row),
            "letter_hint": game_session.letter_hint,
        }

    def start_round():
        logger.info("🔄 New round requested")
        game_session.new_round()
        payload = round_payload()
        if game_session.round is None:
            socketio.emit("no_characters", payload)
        else:
            socketio.emit("round_started", payload)
            socketio.emit("letter_hint", {"letter_hint": game_session.letter_hint})
        return payload

    def make_guess(raw):
        outcome = game_session.guess(raw)
        if outcome.status in GUESS_ERRORS:
            return None, GUESS_ERRORS[outcome.status]
        payload = guess_payload(outcome)
        socketio.emit("feedback", payload)
        socketio.emit("letter_hint", {"letter_hint": payload["letter_hint"]})
        if outcome.status is GuessStatus.WON:
            socketio.emit("round_won", {"name": outcome.state.secret.name})
        return payload, None

    def do_reveal():
        if game_session.round is None:
            return None
        payload = reveal_payload(game_session.reveal())
        socketio.emit("round_revealed", payload)
        return payload

    def set_hint(enabled):
        game_session.set_letter_hint(enabled)
        payload = {"enabled": game_session.letter_hint_enabled, "letter_hint": game_session.letter_hint}
        socketio.emit("letter_hint", {"letter_hint": payload["letter_hint"]})
        return payload

    # ---------------------- HTTP endpoints ----------------------
    @app.route("/health")
    def health():
        return jsonify({"status": "ok", "characters_loaded": len(game_session.characters)})

    @app.route("/categories")
    def categories():
        return jsonify(header_payload(game_session.categories))

    @app.route("/state")
    def state():
        return jsonify(game_session.status())

    @app.route("/reset", methods=["POST"])
    def reset():
        return jsonify(start_round())

    @app.route("/search")
    def search():
        q = request.args.get("q", "").strip()
        if not q:
            return jsonify([])
        return jsonify(suggestion_payload(game_session.suggestions(q)))

    @app.route("/guess", methods=["POST"])
    def guess():
        raw = request.form.get("guess") or text_field(request.get_json(silent=True), "guess")
        payload, error = make_guess(raw)
        if error:
            return jsonify({"error": error}), 400
        return jsonify(payload)

    @app.route("/reveal", methods=["GET", "POST"])
    def reveal():
        payload = do_reveal()
        if payload is None:
            return jsonify({"error": "No active target"}), 400
        return jsonify(payload)

    @app.route("/hint", methods=["POST"])
    def hint():
        data = as_dict(request.get_json(silent=True))
        if not isinstance(data.get("enabled"), bool):
            return jsonify({"error": "enabled must be true or false"}), 400
        return jsonify(set_hint(data["enabled"]))

    # ---------------------- Socket events ----------------------
    @socketio.on("connect")
    def handle_connect(auth=None):
        emit("categories", header_payload(game_session.categories))
        emit("round_started" if game_session.round else "no_characters", round_payload())

    @socketio.on("new_round")
    def handle_new_round(data=None):
        start_round()

    @socketio.on("make_guess")
    def handle_make_guess(data=None):
        payload, error = make_guess(text_field(data, "guess"))
        if error:
            emit("guess_error", {"msg": error})

    @socketio.on("reveal")
    def handle_reveal(data=None):
        if do_reveal() is None:
            emit("guess_error", {"msg": "No active target"})

    @socketio.on("set_letter_hint")
    def handle_set_letter_hint(data=None):
        enabled = as_dict(data).get("enabled")
        if not isinstance(enabled, bool):
            emit("guess_error", {"msg": "enabled must be true or false"})
            return
        set_hint(enabled)

    @socketio.on("search")
    def handle_search(data=None):
        q = text_field(data, "q").strip()
        items = game_session.suggestions(q) if q else []
        emit("suggestions", suggestion_payload(items))

    return app, socketio


# ---------------------- run ----------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    settings = load_settings()
    app, socketio = create_app(settings)
    socketio.run(app, host=settings.host, port=settings.port, debug=True, allow_unsafe_werkzeug=True)
