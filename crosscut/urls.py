from django.urls import include, path

urlpatterns = [
    path("", include("daily.urls")),
]

handler404 = "daily.views.not_found"
handler500 = "daily.views.server_error"
