"""
Storefront Users Views Package

Public signup and login endpoints.

Author: Storefront Development Team
Version: 1.0.0
"""

from .auth_views import LoginView, SignupView
