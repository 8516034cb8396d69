"""
Portfolio Routes - Visitor interactions with the portfolio
Handles: Contact form submissions
"""

from flask import current_app, flash, redirect, request, url_for
from markupsafe import escape
from sqlalchemy.exc import SQLAlchemyError
from extensions import db
from models import Message
from utils.notifications import send_telegram_notification
from utils.security import check_rate_limit, get_client_ip
from . import portfolio_bp

MAX_MESSAGE_LENGTH = 5000


@portfolio_bp.route('/contact', methods=['POST'])
def contact():
    """Contact form processing - saves the message and notifies the owner"""
    section_id = request.form.get('section_id', '').strip() or 'contact'
    back = url_for('site.index', _anchor=section_id)

    if not current_app.config.get('CONTACT_FORM_ENABLED'):
        flash('The contact form is disabled.', 'danger')
        return redirect(back)

    # Honeypot spam protection
    if request.form.get('website'):
        current_app.logger.info(f"Honeypot triggered by {get_client_ip()}, message dropped")
        flash('Message sent successfully! I will get back to you soon.', 'success')
        return redirect(back)

    if not check_rate_limit('portfolio_contact'):
        flash('Too many requests. Please try again in a minute.', 'danger')
        return redirect(back)

    name = request.form.get('name', '').strip()
    email = request.form.get('email', '').strip()
    message_content = request.form.get('message', '').strip()

    if not all([name, email, message_content]):
        flash('Please fill in your name, email and message.', 'danger')
        return redirect(back)

    if '@' not in email:
        flash('Please enter a valid email address.', 'danger')
        return redirect(back)

    try:
        new_message = Message(
            name=name[:255],
            email=email[:255],
            message=message_content[:MAX_MESSAGE_LENGTH],
            is_read=False,
            section_id=section_id[:100],
            ip_address=get_client_ip()[:45],
        )
        db.session.add(new_message)
        db.session.commit()
    except SQLAlchemyError as e:
        current_app.logger.error(f"Contact form error: {str(e)}")
        db.session.rollback()
        flash('Error sending message. Please try again.', 'danger')
        return redirect(back)

    current_app.logger.info(f"Contact message saved to DB, message_id: {new_message.id}")

    send_telegram_notification(
        f"📧 <b>New Portfolio Message</b>\n\n"
        f"👤 <b>From:</b> {escape(name)}\n"
        f"📧 <b>Email:</b> {escape(email)}\n"
        f"💬 <b>Message:</b>\n{escape(message_content[:200])}{'...' if len(message_content) > 200 else ''}")

    flash('Message sent successfully! I will get back to you soon.', 'success')
    return redirect(back)
