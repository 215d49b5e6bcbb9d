import logging

from flask import Flask, render_template, redirect, url_for, request, flash, jsonify

from .password_strength import (
    calculate_password_strength,
    get_password_feedback,
    is_password_strong,
    STRONG_FEEDBACK,
)
from .report import build_report
from .settings import get_settings
from .signup import SignupChecker

SETTINGS = get_settings()

app = Flask(__name__, template_folder=str(SETTINGS.templates_dir))
app.secret_key = SETTINGS.secret_key
logger = logging.getLogger(__name__)

signup_checker = SignupChecker()


def _meter_context(password: str) -> dict:
    return {
        'password_given': bool(password),
        'strength': calculate_password_strength(password),
        'feedback': get_password_feedback(password),
        'strong_enough': is_password_strong(password),
        'success_message': STRONG_FEEDBACK,
    }


# --- Strength meter page ---
@app.route('/', methods=['GET', 'POST'])
def index():
    password = request.form.get('password', '') if request.method == 'POST' else ''
    return render_template('index.html', **_meter_context(password))


# --- API: strength report ---
@app.route('/api/password/strength', methods=['POST'])
def api_password_strength():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return {'error': 'Expected a JSON object body'}, 400
    password = payload.get('password')
    if not isinstance(password, str):
        return {'error': 'Missing or invalid password field'}, 400
    report = build_report(password)
    logger.debug("API strength report: level=%s length=%s",
                 report['strength']['level'], len(password))
    return jsonify(report)


# --- Signup route ---
@app.route('/signup', methods=['GET', 'POST'])
def signup():
    if request.method == 'POST':
        email = request.form.get('email', '').strip()
        password = request.form.get('password', '')
        confirm_password = request.form.get('confirm_password', '')
        success, message = signup_checker.check(email, password, confirm_password)
        logger.debug("Signup check for %s: success=%s message=%s", email, success, message)
        if success:
            flash(message, 'success')
            return redirect(url_for('signup'))
        flash(message, 'danger')
        return render_template(
            'signup.html',
            email=email,
            passwords_match=signup_checker.passwords_match(password, confirm_password),
            **_meter_context(password),
        )
    return render_template('signup.html', email='', passwords_match=False, **_meter_context(''))
