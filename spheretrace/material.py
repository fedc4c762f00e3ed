class Material:
    """Specular parameters shared by every sphere in a scene."""

    def __init__(self, specular_value, specular_power):
        self.specular_value = float(specular_value)
        self.specular_power = float(specular_power)

    def __repr__(self):
        return "Material(specular_value={}, specular_power={})".format(self.specular_value, self.specular_power)
