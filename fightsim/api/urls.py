from django.urls import path

from . import views

urlpatterns = [
    path("roster/", views.RosterList.as_view(), name="roster-list"),
    path("roster/<int:person_id>/", views.RosterDetail.as_view(), name="roster-detail"),
    path("simulate/", views.SimulateBout.as_view(), name="simulate-bout"),
]
