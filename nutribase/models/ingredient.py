from nutribase.extensions import db

class Ingredient(db.Model):
    __tablename__ = "ingredients"

    id = db.Column("ingredientid", db.Integer, primary_key=True)
    name = db.Column("name", db.String(255), nullable=False)
    created_at = db.Column("createdat", db.DateTime, server_default=db.func.now())
    updated_at = db.Column("updatedat", db.DateTime, server_default=db.func.now(), onupdate=db.func.now())

    __table_args__ = (
        db.UniqueConstraint("name", name="uq_ingredient_name"),
    )
