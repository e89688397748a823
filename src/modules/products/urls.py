"""Product URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.products.views import ProductDetailView, ProductListCreateView

urlpatterns = [
    path("products", ProductListCreateView.as_view(), name="product_list"),
    path("products/<str:pk>", ProductDetailView.as_view(), name="product_detail"),
]
