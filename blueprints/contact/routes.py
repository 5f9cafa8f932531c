"""
Contact Routes - Contact form submission endpoint
"""

from flask import request, current_app
from extensions import get_store
from models import Submission, ValidationError
from storage import StorageError
from utils.notifications import notify_new_submission
from utils.security import get_client_ip
from . import contact_bp

SUCCESS_MESSAGE = 'Message saved'
STORAGE_ERROR_MESSAGE = 'Error saving message'


def plain_response(body, status):
    return current_app.response_class(body, status=status, mimetype='text/plain')


@contact_bp.route('/contact', methods=['POST'])
def contact():
    """Validate a contact submission and store it - one insert, no retries"""
    client_ip = get_client_ip()
    payload = request.get_json(silent=True)
    current_app.logger.info(f"Contact submission received from {client_ip}")

    try:
        submission = Submission.from_payload(payload)
    except ValidationError as e:
        current_app.logger.warning(
            f"Contact submission rejected from {client_ip}: invalid fields {', '.join(e.fields)}")
        return plain_response(e.message, current_app.config.get('VALIDATION_ERROR_STATUS', 500))

    try:
        submission_id = get_store().save(submission)
    except StorageError as e:
        current_app.logger.error(f"Contact submission save error: {str(e)}")
        return plain_response(STORAGE_ERROR_MESSAGE, 500)

    current_app.logger.info(f"Contact submission saved to DB, submission_id: {submission_id}")
    notify_new_submission(submission)

    return plain_response(SUCCESS_MESSAGE, 201)
