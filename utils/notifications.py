"""
Notifications Module - Telegram alerts to the site owner on new contact messages
"""

import html
import threading
import requests
from flask import current_app

TELEGRAM_API_URL = "https://api.telegram.org/bot{token}/sendMessage"
PREVIEW_LENGTH = 200


def get_owner_telegram_credentials():
    """
    Get the owner's Telegram credentials from app config

    Returns:
        tuple: (bot_token, chat_id) or (None, None) if not configured
    """
    bot_token = current_app.config.get('OWNER_TELEGRAM_BOT_TOKEN')
    chat_id = current_app.config.get('OWNER_TELEGRAM_CHAT_ID')
    if bot_token and chat_id:
        return bot_token, chat_id
    return None, None


def send_telegram_notification(message_text, bot_token, chat_id, logger):
    """
    Send a Telegram message

    Runs outside the request (and app) context, so the logger is passed in.

    Args:
        message_text (str): HTML-formatted message
        bot_token (str): Telegram bot token
        chat_id (str): Target chat id
        logger (logging.Logger): Logger to report the outcome to

    Returns:
        bool: True if sent successfully, False otherwise
    """
    try:
        url = TELEGRAM_API_URL.format(token=bot_token)
        payload = {
            'chat_id': chat_id,
            'text': message_text,
            'parse_mode': 'HTML'
        }
        response = requests.post(url, json=payload, timeout=10)
        if response.status_code == 200:
            logger.info("Owner Telegram notification sent")
            return True
        logger.error(f"Telegram API error: {response.status_code}")
        return False
    except requests.RequestException as e:
        logger.error(f"Telegram notification error: {str(e)}")
        return False


def format_submission_message(submission):
    """Build the Telegram text for a new submission"""
    message = submission.message or ''
    preview = message[:PREVIEW_LENGTH] + ('...' if len(message) > PREVIEW_LENGTH else '')
    return (
        f"📧 <b>New Portfolio Message</b>\n\n"
        f"👤 <b>From:</b> {html.escape(submission.name)}\n"
        f"📧 <b>Email:</b> {html.escape(submission.email)}\n"
        f"💬 <b>Message:</b>\n{html.escape(preview) or '<i>(empty)</i>'}"
    )


def notify_new_submission(submission):
    """
    Notify the owner about a stored submission, without blocking the request

    Returns:
        threading.Thread: The started sender thread, or None if notifications are not configured
    """
    bot_token, chat_id = get_owner_telegram_credentials()
    if not (bot_token and chat_id):
        current_app.logger.debug("Owner Telegram credentials not configured")
        return None

    thread = threading.Thread(
        target=send_telegram_notification,
        args=(format_submission_message(submission), bot_token, chat_id, current_app.logger)
    )
    thread.daemon = True
    thread.start()
    return thread
