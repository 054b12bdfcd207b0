from django.urls import include, path

urlpatterns = [
    path("", include("meme_editor.urls")),
]
