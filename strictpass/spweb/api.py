from flask import Flask, jsonify, request
from strictpass.config import load_config
from strictpass.generator import generate_compliant
from strictpass.policy import check_password

app = Flask(__name__)

@app.route('/')
def home():
    return jsonify({
        "message": "StrictPass API is running"
    })

@app.route('/check', methods=['POST'])
def check_route():
    data = request.get_json(silent=True) or {}
    password = data.get('password')
    if not isinstance(password, str):
        return jsonify({'error': 'password is required'}), 400
    entry = None
    if 'uid' in data or 'gecos' in data:
        entry = {k: [data[k]] for k in ('uid', 'gecos') if data.get(k)}
    cfg = load_config()
    try:
        verdict = check_password(password, entry, dictionary_path=cfg.get('dictionary_path'))
    except OSError as e:
        app.logger.error('Could not read word list: %s', e)
        return jsonify({'error': 'word list unavailable'}), 500
    return jsonify(verdict.to_dict())

@app.route('/generate', methods=['POST'])
def generate_route():
    data = request.get_json(silent=True) or {}
    length = data.get('length', 16)
    symbols = data.get('symbols')
    if symbols is not None and not isinstance(symbols, str):
        return jsonify({'error': 'symbols must be a string'}), 400
    try:
        password = generate_compliant(int(length), symbols=symbols)
    except (TypeError, ValueError) as e:
        return jsonify({'error': str(e)}), 400
    except RuntimeError as e:
        return jsonify({'error': str(e)}), 422
    return jsonify({'password': password})

if __name__ == "__main__":
    app.run(debug=True)
