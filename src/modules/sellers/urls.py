"""Seller URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.sellers.views import LoginView, SignupView

urlpatterns = [
    path("sellers/signup", SignupView.as_view(), name="seller_signup"),
    path("sellers/login", LoginView.as_view(), name="seller_login"),
]
