# routes/bible.py
from flask import Blueprint, jsonify
import logging

from utils.bible_loader import list_translations, load_chapter, load_manifest

bible_bp = Blueprint('bible', __name__)

logger = logging.getLogger(__name__)


@bible_bp.route('/translations', methods=['GET'])
def get_translations():
    try:
        translations = list_translations()
        logger.info(f"Found {len(translations)} translations")
        return jsonify(translations)
    except Exception as e:
        logger.error(f"Error listing translations: {str(e)}", exc_info=True)
        return jsonify({"error": str(e)}), 500


@bible_bp.route('/<translation>/manifest', methods=['GET'])
def get_manifest(translation):
    try:
        manifest = load_manifest(translation)
        if manifest is None:
            return jsonify({"error": "Translation not found"}), 404
        return jsonify(manifest.to_json())
    except Exception as e:
        logger.error(f"Error loading manifest for {translation}: {str(e)}", exc_info=True)
        return jsonify({"error": str(e)}), 500


@bible_bp.route('/<translation>/<book>/<int:chapter>', methods=['GET'])
def get_chapter(translation, book, chapter):
    try:
        record = load_chapter(translation, book, chapter)
        if record is None:
            return jsonify({"error": "Chapter not found"}), 404
        return jsonify(record.to_json())
    except Exception as e:
        logger.error(f"Error loading {translation} {book} {chapter}: {str(e)}", exc_info=True)
        return jsonify({"error": str(e)}), 500
