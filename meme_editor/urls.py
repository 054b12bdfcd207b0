from django.urls import path

from meme_editor.views import IndexView, MemeView

urlpatterns = [
    path("", IndexView.as_view(), name="index"),
    path("meme", MemeView.as_view(), name="meme"),
]
