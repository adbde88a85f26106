""" Estados de matrícula e de métodos de inscrição """

from enum import Enum


class EnrolmentStatus(str, Enum):
    """ Situação da matrícula do usuário no curso """
    ACTIVE = "active" #Matrícula ativa
    SUSPENDED = "suspended" #Matrícula suspensa

class EnrolInstanceStatus(str, Enum):
    """ Situação do método de inscrição do curso """
    ENABLED = "enabled" #Método habilitado
    DISABLED = "disabled" #Método desabilitado, matrículas ficam inativas
