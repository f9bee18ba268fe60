from marshmallow import EXCLUDE, Schema, ValidationError, fields, post_load, validate, validates_schema

from nutribase.services.records import MealIngredientEntry


class MealIngredientSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    ingredient_id = fields.Int(required=True, strict=True)
    amount_in_grams = fields.Float(required=True, validate=validate.Range(min=0))

    @post_load
    def make_entry(self, data, **kwargs):
        return MealIngredientEntry(**data)


class CreateMealSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    date_time = fields.DateTime(required=True)
    ingredients = fields.List(fields.Nested(MealIngredientSchema), load_default=list)

    @validates_schema
    def validate_unique_ingredients(self, data, **kwargs):
        ids = [entry.ingredient_id for entry in data.get("ingredients") or []]
        if len(ids) != len(set(ids)):
            raise ValidationError("Each ingredient may appear only once per meal", field_name="ingredients")


class AddMealIngredientSchema(MealIngredientSchema):
    pass
