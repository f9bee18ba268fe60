from marshmallow import EXCLUDE, Schema, ValidationError, fields, post_load, validate, validates_schema

from nutribase.services.records import NutrientEntry


class NutrientAmountSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    amount = fields.Float(required=True, validate=validate.Range(min=0))

    @validates_schema
    def validate_name(self, data, **kwargs):
        if not (data.get("name") or "").strip():
            raise ValidationError("Nutrient name must not be blank", field_name="name")

    @post_load
    def make_entry(self, data, **kwargs):
        return NutrientEntry(name=data["name"].strip(), amount=data["amount"])


class CreateIngredientSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    serving_size_in_grams = fields.Float(
        required=True, validate=validate.Range(min=0, min_inclusive=False)
    )
    nutrients = fields.List(fields.Nested(NutrientAmountSchema), required=True)

    @validates_schema
    def validate_names(self, data, **kwargs):
        if not (data.get("name") or "").strip():
            raise ValidationError("Name must not be blank", field_name="name")

        seen = set()
        for entry in data.get("nutrients") or []:
            if entry.name in seen:
                raise ValidationError(
                    f"Nutrient '{entry.name}' is listed more than once", field_name="nutrients"
                )
            seen.add(entry.name)

    @post_load
    def strip_name(self, data, **kwargs):
        data["name"] = data["name"].strip()
        return data
