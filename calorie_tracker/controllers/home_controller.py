from flask import jsonify
from calorie_tracker.extensions import db

def home_index():
    return jsonify({
        "message": "Calorie tracker API",
    })

def health_check():
    db_status = "healthy"
    try:
        db.session.execute(db.text("SELECT 1"))
    except Exception as e:
        db.session.rollback()
        db_status = f"unhealthy: {e.__class__.__name__}"

    return jsonify({
        "status": "online",
        "database": db_status,
    }), 200 if db_status == "healthy" else 503
