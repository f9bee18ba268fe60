from flask import current_app, jsonify
from sqlalchemy import text

from nutribase.extensions import db

def health_check():
    db_status = "healthy"
    status = 200
    try:
        # Ping the database
        db.session.execute(text('SELECT 1'))
    except Exception as e:
        current_app.logger.warning(f"Health check failed: {e}")
        db_status = f"unhealthy: {str(e)}"
        status = 503

    return jsonify({
        "status": "online",
        "database": db_status,
    }), status
