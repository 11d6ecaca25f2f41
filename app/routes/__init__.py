"""ルート定義"""

from app.routes.health import bp as health_bp
from app.routes.clinics import bp as clinics_bp

__all__ = ["health_bp", "clinics_bp"]
