"""
Notifications Module - Telegram notifications to the portfolio owner
"""

import requests
from flask import current_app

TELEGRAM_API_URL = "https://api.telegram.org/bot{token}/sendMessage"


def get_telegram_credentials():
    """
    Get Telegram credentials from the app configuration

    Returns:
        tuple: (bot_token, chat_id) or (None, None) if not configured
    """
    bot_token = current_app.config.get('TELEGRAM_BOT_TOKEN')
    chat_id = current_app.config.get('TELEGRAM_CHAT_ID')
    if bot_token and chat_id:
        return bot_token, chat_id
    return None, None


def send_telegram_notification(message_text):
    """
    Send Telegram notification to the portfolio owner

    Args:
        message_text (str): Message to send (HTML parse mode)

    Returns:
        bool: True if sent successfully, False otherwise
    """
    bot_token, chat_id = get_telegram_credentials()

    if not (bot_token and chat_id):
        current_app.logger.debug("No Telegram credentials configured, skipping notification")
        return False

    try:
        url = TELEGRAM_API_URL.format(token=bot_token)
        payload = {
            'chat_id': chat_id,
            'text': message_text,
            'parse_mode': 'HTML'
        }
        response = requests.post(url, json=payload, timeout=10)
        if response.status_code == 200:
            current_app.logger.info("Telegram notification sent")
            return True
        else:
            current_app.logger.error(f"Telegram API error: {response.status_code}")
            return False
    except requests.RequestException as e:
        current_app.logger.error(f"Telegram notification error: {str(e)}")
        return False
