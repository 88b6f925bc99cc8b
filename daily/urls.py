from django.urls import path, register_converter

from . import converters, views

register_converter(converters.DateConverter, "date")

app_name = "daily"

# Order matters: first match wins. Legacy hosts never get here, see
# daily.middleware.CanonicalDomainMiddleware.
urlpatterns = [
    path("", views.home, name="home"),
    path("daily/", views.daily_list_slash),
    path("daily", views.daily_list, name="list"),
    path("daily/<date:date>/", views.daily_thought_slash),
    path("daily/<date:date>", views.daily_thought, name="thought"),
    # Anything else: /style.css, /favicon.ico, ...
    path("<path:req_path>", views.static_fallback, name="static"),
]
