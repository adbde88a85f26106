""" Serviço de manutenção que remove usuários suspensos dos grupos de curso """

__version__ = "0.1.0"
