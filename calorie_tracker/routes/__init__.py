from .home_routes import home_bp
from .auth_routes import auth_bp
from .profile_routes import profile_bp
from .daily_log_routes import daily_log_bp
from .meal_plan_routes import meal_plan_bp
from .planned_food_routes import planned_food_bp
from .custom_food_routes import custom_food_bp

def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(profile_bp)
    app.register_blueprint(daily_log_bp)
    app.register_blueprint(meal_plan_bp)
    app.register_blueprint(planned_food_bp)
    app.register_blueprint(custom_food_bp)
