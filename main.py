from flask import Flask, request, jsonify
from flask_cors import CORS
from flip_engine import EXPENSE_CATEGORIES, DealInputs, DealProcessor
import os
import logging

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = Flask(__name__)

# Enable CORS for all routes so browser forms on other origins can call the API
CORS(app)

# Initialize the deal processor
processor = DealProcessor()


@app.route("/api", methods=["GET"])
def api_info():
    """API information endpoint"""
    return jsonify({
        "status": "ok",
        "message": "Fix-and-Flip Deal Analyzer API",
        "version": "1.0",
        "endpoints": {
            "analyze_deal": "/analyze_deal [POST]",
            "expense_categories": "/expense_categories [GET]",
            "defaults": "/defaults [GET]",
            "health": "/health [GET]"
        }
    }), 200


@app.route("/health", methods=["GET"])
def health():
    """Health check for monitoring"""
    return jsonify({"status": "healthy"}), 200


@app.route("/expense_categories", methods=["GET"])
def expense_categories():
    """Monthly expense categories a deal can include"""
    return jsonify({"categories": list(EXPENSE_CATEGORIES)}), 200


@app.route("/defaults", methods=["GET"])
def defaults():
    """Starting values for a new deal form"""
    return jsonify({"inputs": DealInputs().to_dict()}), 200


@app.route("/analyze_deal", methods=["POST"])
def analyze_deal():
    """
    Analyze a fix-and-flip deal
    """
    try:
        # Get input data
        input_data = request.get_json(force=True, silent=True)

        if not input_data:
            return jsonify({
                "error": "No input data provided",
                "status": "failed"
            }), 400

        logger.info("Analyzing deal")

        result = processor.process_from_dict(input_data)

        logger.info(f"Deal analyzed successfully: {result['verdict']['classification']}")

        return jsonify(result), 200

    except (ValueError, KeyError, TypeError) as e:
        # Validation errors from engine
        logger.error(f"Validation error: {str(e)}")
        return jsonify({
            "error": str(e),
            "status": "validation_failed"
        }), 400

    except Exception as e:
        # Unexpected errors
        logger.error(f"Processing error: {str(e)}", exc_info=True)
        return jsonify({
            "error": "An unexpected error occurred during processing",
            "status": "failed"
        }), 500


@app.route("/analyze", methods=["POST"])
def analyze_legacy():
    """Legacy endpoint - redirects to /analyze_deal"""
    return analyze_deal()


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))
    app.run(host="0.0.0.0", port=port, debug=False)
