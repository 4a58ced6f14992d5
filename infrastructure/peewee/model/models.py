from peewee import CharField, DateField, DateTimeField, IntegerField, Model, TextField


class TareaModel(Model):
    id = CharField(primary_key=True)
    posicion = IntegerField(index=True)
    titulo = CharField()
    descripcion = TextField(null=True)
    fecha_limite = DateField()
    prioridad = CharField()
    estado = CharField()
    creada_en = DateTimeField()
    actualizada_en = DateTimeField()

    class Meta:
        table_name = "tareas"
