""" Canais de notificação """

from enum import Enum


class ChannelType(str, Enum):
    """ Enumeração dos canais de notificação """
    EMAIL = "email" #Envio de emails
