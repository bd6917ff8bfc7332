from __future__ import annotations

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import Q
from rest_framework import generics, status
from rest_framework.response import Response
from rest_framework.views import APIView

from fightsim.conf import MAX_BOUT_ACTIONS
from fightsim.engine import SimulationError, simulate_bout
from fightsim.models import RosterFighter
from fightsim.services.bouts import roster_bout

from .serializers import (
    BoutResultSerializer,
    RosterFighterDetailSerializer,
    RosterFighterListSerializer,
    SimulateBoutSerializer,
    fighter_from_payload,
)

logger = logging.getLogger(__name__)


ORDERING_FIELDS = {"last_name", "first_name", "nationality", "wins", "losses"}


class RosterList(generics.ListAPIView):
    serializer_class = RosterFighterListSerializer

    def get_queryset(self):
        qs = RosterFighter.objects.order_by("last_name", "first_name")
        ordering = self.request.GET.get("ordering")
        if ordering and ordering.removeprefix("-") in ORDERING_FIELDS:
            qs = qs.order_by(ordering, "last_name", "first_name")
        nationality = self.request.GET.get("nationality")
        if nationality:
            qs = qs.filter(nationality__iexact=nationality)
        q = self.request.GET.get("q")
        if q:
            qs = qs.filter(Q(first_name__icontains=q) | Q(last_name__icontains=q))
        limit = self.request.GET.get("limit")
        if limit:
            try:
                qs = qs[: int(limit)]
            except ValueError:
                pass
        return qs


class RosterDetail(generics.RetrieveAPIView):
    queryset = RosterFighter.objects.all()
    serializer_class = RosterFighterDetailSerializer
    lookup_field = "person_id"


class SimulateBout(APIView):
    def post(self, request):
        serializer = SimulateBoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        seed = data.get("seed")
        max_actions = data.get("max_actions", MAX_BOUT_ACTIONS)
        try:
            if "fighters" in data:
                red, blue = (fighter_from_payload(f) for f in data["fighters"])
                result = simulate_bout(red, blue, seed=seed, max_actions=max_actions)
            else:
                result = roster_bout(
                    data["red_id"], data["blue_id"], seed=seed, max_actions=max_actions
                )
        except DjangoValidationError as exc:
            return Response({"detail": exc.messages}, status=status.HTTP_400_BAD_REQUEST)
        except SimulationError as exc:
            logger.info("simulate.rejected %s", exc)
            return Response({"detail": [str(exc)]}, status=status.HTTP_400_BAD_REQUEST)

        return Response(BoutResultSerializer(result).data)
