"""
Módulo utilitário para validação de CPF (dígitos verificadores módulo 11).
"""
import re

CPF_LENGTH = 11


class CPFUtils:
    @staticmethod
    def normalize_cpf(cpf: str) -> str:
        """
        Remove caracteres não numéricos do CPF.
        Parâmetros:
            cpf (str): CPF em qualquer formato
        Retorno:
            str: CPF apenas com dígitos
        Exemplo: '529.982.247-25' -> '52998224725'
        """
        return re.sub(r'[^0-9]', '', cpf)

    @staticmethod
    def check_digit(digits: str) -> int:
        """
        Calcula o dígito verificador para o prefixo informado (9 ou 10 dígitos).
        O peso do primeiro dígito é len(digits) + 1 e decresce até 2.
        """
        weight = len(digits) + 1
        soma = sum(int(d) * (weight - j) for j, d in enumerate(digits))
        digito = 11 - (soma % 11)
        # 10 e 11 viram 0
        if digito >= 10:
            digito = 0
        return digito

    @staticmethod
    def is_valid_cpf(cpf: str) -> bool:
        """
        Valida CPF pelo algoritmo dos dígitos verificadores.
        Parâmetros:
            cpf (str): CPF com ou sem formatação
        Retorno:
            bool: True se válido, False caso contrário
        """
        cpf = CPFUtils.normalize_cpf(cpf)
        if len(cpf) != CPF_LENGTH or cpf == cpf[0] * CPF_LENGTH:
            return False
        for i in [9, 10]:
            if CPFUtils.check_digit(cpf[:i]) != int(cpf[i]):
                return False
        return True
