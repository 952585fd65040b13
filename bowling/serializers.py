"""Encapsulates all serialisers used to render a game."""
from rest_framework import serializers

import collections


class BaseSerializer(serializers.Serializer):

    def to_representation(self, instance):
        """Exclude the errors if there are none."""
        ret = super(BaseSerializer, self).to_representation(instance)
        return collections.OrderedDict(
            (k, v) for k, v in ret.items() if k != 'errors' or v)


class ErrorSerializer(serializers.Serializer):
    """Representation of any errors."""
    error_code = serializers.IntegerField()
    error_message = serializers.CharField(max_length=200)


class FrameSerializer(serializers.Serializer):
    """Pins and scores of a single frame."""
    pins_on_first_roll = serializers.IntegerField(allow_null=True)
    pins_on_second_roll = serializers.IntegerField(allow_null=True)
    is_strike = serializers.BooleanField()
    is_spare = serializers.BooleanField()
    bonus_rolls = serializers.IntegerField()
    current_score = serializers.IntegerField()
    total_score = serializers.IntegerField()


class GameSerializer(serializers.Serializer):
    """Encapsulates the scoring frames in addition to the total score."""
    current_round = serializers.IntegerField(source='get_current_round_index')
    score = serializers.IntegerField(source='get_score')
    is_complete = serializers.BooleanField(source='is_game_complete')
    frames = serializers.SerializerMethodField()
    bonus_pins = serializers.IntegerField(allow_null=True)

    def get_frames(self, game):
        """Numbers the frames starting from 1."""
        return [
            collections.OrderedDict(
                [('frame', index + 1)] +
                list(FrameSerializer(frame).data.items()))
            for index, frame in enumerate(game.scoring_frames())]


class PlayResultSerializer(BaseSerializer):
    game = GameSerializer()
    errors = ErrorSerializer(required=False, many=True)
