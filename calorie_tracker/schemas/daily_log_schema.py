from marshmallow import Schema, fields, validate, validates_schema, ValidationError, EXCLUDE
from calorie_tracker.utils.http import valid_id
from calorie_tracker.utils.enums import StatsPeriod, TargetSource

non_negative = validate.Range(min=0)


class CreateDailyLogSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    action = fields.Str(validate=validate.Equal("create"))
    date = fields.Date(allow_none=True, load_default=None)


class AddFoodSchema(Schema):
    """
    Consumed food. Nutrients come from one of, in order:
    explicit ``calories`` (+ macros), ``custom_food_id``, or inline ``*_per_100g`` values.
    """

    class Meta:
        unknown = EXCLUDE

    action = fields.Str(validate=validate.Equal("addFood"))
    date = fields.Date(allow_none=True, load_default=None)
    food_name = fields.Str(required=True, validate=validate.Length(min=1))
    quantity_grams = fields.Float(required=True, validate=validate.Range(min=0, min_inclusive=False))
    calories = fields.Float(allow_none=True, validate=non_negative)
    protein = fields.Float(allow_none=True, load_default=0, validate=non_negative)
    carbs = fields.Float(allow_none=True, load_default=0, validate=non_negative)
    fat = fields.Float(allow_none=True, load_default=0, validate=non_negative)
    calories_per_100g = fields.Float(allow_none=True, validate=non_negative)
    protein_per_100g = fields.Float(allow_none=True, validate=non_negative)
    carbs_per_100g = fields.Float(allow_none=True, validate=non_negative)
    fat_per_100g = fields.Float(allow_none=True, validate=non_negative)
    custom_food_id = fields.Int(allow_none=True, validate=valid_id)
    meal_plan_id = fields.Int(allow_none=True, load_default=None, validate=valid_id)

    @validates_schema
    def validate_calorie_source(self, data, **kwargs):
        sources = ("calories", "custom_food_id", "calories_per_100g")
        if all(data.get(key) is None for key in sources):
            raise ValidationError("Missing data for required field.", field_name="calories")


class UpdateDailyLogSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    date = fields.Date(allow_none=True, load_default=None)
    weight = fields.Float(allow_none=True, validate=validate.Range(min=0))
    notes = fields.Str(allow_none=True)


class StatsQuerySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    period = fields.Str(load_default=StatsPeriod.WINDOW.value, validate=validate.OneOf([e.value for e in StatsPeriod]))
    days = fields.Int(allow_none=True, load_default=None, validate=validate.Range(min=1))
    date = fields.Date(allow_none=True, load_default=None)
    target = fields.Float(allow_none=True, load_default=None, validate=non_negative)
    target_source = fields.Str(
        load_default=TargetSource.MEAL_PLANS.value,
        validate=validate.OneOf([e.value for e in TargetSource]),
    )


DAILY_LOG_ACTIONS = {
    "create": CreateDailyLogSchema,
    "addFood": AddFoodSchema,
}
