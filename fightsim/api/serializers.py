from __future__ import annotations

from rest_framework import serializers

from fightsim.conf import MAX_BOUT_ACTIONS
from fightsim.engine import BoutResult, CompositeRating, FighterSim
from fightsim.engine.config import DEFAULT_HEALTH
from fightsim.models import RosterFighter


class RosterFighterListSerializer(serializers.ModelSerializer):
    class Meta:
        model = RosterFighter
        fields = [
            "person_id",
            "first_name",
            "last_name",
            "nationality",
            "hometown",
            "wins",
            "losses",
            "image",
        ]


class RosterFighterDetailSerializer(RosterFighterListSerializer):
    record = serializers.CharField(read_only=True)

    class Meta(RosterFighterListSerializer.Meta):
        fields = RosterFighterListSerializer.Meta.fields + ["record"]


class CompositeRatingSerializer(serializers.Serializer):
    output = serializers.FloatField(min_value=0)
    kicking = serializers.FloatField(min_value=0)
    striking = serializers.FloatField(min_value=0)

    def validate(self, attrs):
        if attrs["kicking"] + attrs["striking"] == 0:
            raise serializers.ValidationError("kicking and striking cannot both be zero.")
        return attrs


class FighterSimSerializer(serializers.Serializer):
    id = serializers.IntegerField(required=False, allow_null=True)
    name = serializers.CharField(max_length=100)
    age = serializers.IntegerField(min_value=0, default=0)
    strike_pace = serializers.FloatField(min_value=0, default=0.0)
    composite_rating = CompositeRatingSerializer()
    health = serializers.FloatField(default=DEFAULT_HEALTH)
    skills = serializers.ListField(child=serializers.CharField(), default=list)

    def validate_health(self, value):
        if value <= 0:
            raise serializers.ValidationError("Health must start positive.")
        return value


class SimulateBoutSerializer(serializers.Serializer):
    """Either two inline fighters or two roster person ids."""

    fighters = FighterSimSerializer(many=True, required=False)
    red_id = serializers.IntegerField(min_value=1, required=False)
    blue_id = serializers.IntegerField(min_value=1, required=False)
    seed = serializers.IntegerField(required=False, allow_null=True)
    max_actions = serializers.IntegerField(
        min_value=1, max_value=MAX_BOUT_ACTIONS, required=False
    )

    def validate(self, attrs):
        has_inline = "fighters" in attrs
        has_roster = "red_id" in attrs or "blue_id" in attrs
        if has_inline == has_roster:
            raise serializers.ValidationError(
                "Provide either 'fighters' or both 'red_id' and 'blue_id'."
            )
        if has_inline and len(attrs["fighters"]) != 2:
            raise serializers.ValidationError({"fighters": "Exactly two fighters are required."})
        if has_roster and not ("red_id" in attrs and "blue_id" in attrs):
            raise serializers.ValidationError("Both 'red_id' and 'blue_id' are required.")
        return attrs


class BoutEventSerializer(serializers.Serializer):
    actor = serializers.IntegerField()
    target = serializers.IntegerField()
    outcome = serializers.SerializerMethodField()
    damage = serializers.FloatField()
    target_health = serializers.FloatField(allow_null=True)
    text = serializers.CharField()

    def get_outcome(self, obj) -> str:
        return obj.outcome.value


class BoutResultSerializer(serializers.Serializer):
    winner = serializers.IntegerField(allow_null=True)
    winner_name = serializers.CharField(allow_null=True)
    method = serializers.CharField()
    actions = serializers.IntegerField()
    events = BoutEventSerializer(many=True)
    stats = serializers.SerializerMethodField()
    final_health = serializers.SerializerMethodField()
    rules = serializers.SerializerMethodField()
    seed_used = serializers.IntegerField(allow_null=True)
    summary_text = serializers.CharField()

    def get_stats(self, obj: BoutResult) -> list[dict]:
        return [dict(corner) for corner in obj.stats]

    def get_final_health(self, obj: BoutResult) -> list[float]:
        return list(obj.final_health)

    def get_rules(self, obj: BoutResult) -> dict:
        return {
            "rounds": obj.rules.rounds,
            "round_duration_seconds": obj.rules.round_duration_seconds,
        }


def fighter_from_payload(data: dict) -> FighterSim:
    """Build a FighterSim from validated FighterSimSerializer data."""
    return FighterSim(
        id=data.get("id"),
        name=data["name"],
        age=data["age"],
        strike_pace=data["strike_pace"],
        composite_rating=CompositeRating(**data["composite_rating"]),
        health=data["health"],
        skills=list(data["skills"]),
    )
