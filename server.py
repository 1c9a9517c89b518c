"""
Flask web server for the English-to-code translator
Provides the translation API as JSON endpoints
"""

from flask import Flask, request, jsonify
from flask_cors import CORS
from codewriter import (
    EXAMPLE_COMMANDS, TargetLanguage, Translator, node_to_dict,
    normalize_numbered_lines, tokenize,
)
import io
import os
import sys
import traceback

app = Flask(__name__)
CORS(app)  # Enable CORS for local development

translator = Translator(debug=False)

TRANSLATION_MODES = ('program', 'line')


@app.route('/')
def index():
    """Service banner"""
    return jsonify({
        'service': 'English-to-code translator',
        'languages': [lang.value for lang in TargetLanguage],
        'endpoints': ['/api/translate', '/api/languages', '/api/examples'],
    })


@app.route('/api/languages')
def languages():
    return jsonify({'languages': [lang.value for lang in TargetLanguage]})


@app.route('/api/examples')
def examples():
    return jsonify({'examples': list(EXAMPLE_COMMANDS)})


@app.route('/api/translate', methods=['POST'])
def translate():
    """Translation API endpoint"""
    debug = False
    debug_output = ""

    try:
        data = request.get_json(silent=True) or {}
        text = data.get('text', '')
        language = data.get('language', 'python')
        mode = data.get('mode', 'program')
        debug = bool(data.get('debug', False))

        if not isinstance(text, str) or not text.strip():
            return jsonify({'success': False, 'error': 'No text provided'}), 400

        if mode not in TRANSLATION_MODES:
            return jsonify({
                'success': False,
                'error': f"Unknown mode {mode!r}; use one of: {', '.join(TRANSLATION_MODES)}",
            }), 400

        try:
            language = TargetLanguage.from_name(language).value
        except ValueError as e:
            return jsonify({'success': False, 'error': str(e)}), 400

        # Debug traces go to a per-request buffer, never a shared stream
        if debug:
            buffer = io.StringIO()
            worker = Translator(debug=True, stream=buffer)
        else:
            buffer = None
            worker = translator

        if mode == 'line':
            result = worker.translate_line(text, language)
        else:
            result = worker.translate_program(text, language)

        response_data = format_result_for_json(result)
        response_data['language'] = language
        response_data['mode'] = mode

        if debug:
            debug_output = buffer.getvalue()
            tokens_data = format_tokens_for_json(text)
            response_data['debug_output'] = debug_output
            response_data['tokens'] = tokens_data

            # Add debug metadata for troubleshooting
            response_data['debug_metadata'] = {
                'output_length': len(debug_output),
                'tokens_count': sum(len(line['tokens']) for line in tokens_data),
            }

        return jsonify(response_data)

    except Exception as e:
        error_msg = str(e)
        traceback_str = traceback.format_exc()
        print(f"Translation error: {e}", file=sys.stderr)
        print(traceback_str, file=sys.stderr)

        return jsonify({
            'success': False,
            'error': error_msg,
            'traceback': traceback_str if debug else None,
            'debug_output': debug_output if debug else '',
        }), 500


def format_result_for_json(result):
    """Convert a translation result to JSON-serializable format"""
    data = dict(result)
    if 'ast' in data:
        data['ast'] = node_to_dict(data['ast'])
    if 'nodes' in data:
        data['nodes'] = [node_to_dict(node) for node in data['nodes']]
    return data


def format_tokens_for_json(text):
    """Token stream per normalized line"""
    return [{
        'line': number,
        'normalized': cleaned,
        'tokens': [{'num': i, 'type': token.type.value, 'value': token.value}
                   for i, token in enumerate(tokenize(cleaned))],
    } for number, cleaned in normalize_numbered_lines(text)]


if __name__ == '__main__':
    host = os.environ.get('CODEWRITER_HOST', '0.0.0.0')
    port = int(os.environ.get('CODEWRITER_PORT', '5000'))

    print("=" * 70)
    print("English-to-Code Translator - Web Server")
    print("=" * 70)
    print(f"\nStarting server on http://localhost:{port}")
    print(f"POST English commands to http://localhost:{port}/api/translate")
    print("\nPress Ctrl+C to stop the server")
    print("=" * 70 + "\n")

    app.run(debug=True, host=host, port=port)
