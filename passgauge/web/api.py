import logging
from typing import Optional

from flask import Flask, jsonify, request

from passgauge.config import PatternConfig
from passgauge.evaluator import StrengthEvaluator
from passgauge.generator import suggest_many
from passgauge.suggestions import is_acceptable, requirements_text

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 20


def create_app(config: Optional[PatternConfig] = None) -> Flask:
    app = Flask(__name__)
    evaluator = StrengthEvaluator(config)

    @app.route('/')
    def home():
        return jsonify({"message": "PassGauge API is running"})

    @app.route('/score', methods=['POST'])
    def score_route():
        data = request.get_json(silent=True) or {}
        password = data.get('password') if isinstance(data, dict) else None
        if not isinstance(password, str):
            logger.info("rejected /score request without a string password")
            return jsonify({"error": "'password' must be a string"}), 400
        report = evaluator.evaluate(password)
        result = report.as_dict()
        result["acceptable"] = is_acceptable(report)
        return jsonify(result)

    @app.route('/suggest', methods=['GET'])
    def suggest_route():
        raw = request.args.get('count', '1')
        try:
            count = int(raw)
        except ValueError:
            count = 0
        if not 1 <= count <= MAX_SUGGESTIONS:
            return jsonify({"error": f"count must be between 1 and {MAX_SUGGESTIONS}"}), 400
        return jsonify({"suggestions": suggest_many(count)})

    @app.route('/requirements', methods=['GET'])
    def requirements_route():
        requirements = evaluator.evaluate("").requirements
        return jsonify({
            "text": requirements_text(),
            "requirements": [{"label": r.label, "optional": r.optional} for r in requirements],
        })

    return app


app = create_app()

if __name__ == "__main__":
    app.run(debug=True)
