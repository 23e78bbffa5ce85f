# Selectors and URLs of the eCampus portal. Adjust here if the UI changes.
from enum import Enum

BASE = "https://ecampus.ufam.edu.br/ecampus"
ENTRY_URL = BASE
GRADES_ENDPOINT = f"{BASE}/notasEFrequencia/getNotas"

LOGIN_USER = 'input[type="text"]:visible'
LOGIN_PASS = 'input[type="password"]'
LOGIN_SUBMIT = 'input[type="submit"]'

SESSION_INFO = '#user-information'

TERM_SELECT = 'select#periodo'
TERM_OPTIONS = 'select#periodo > option'
YEAR_INPUT = '#ano'
SEARCH_BUTTON = '#buscar'

GRADES_TABLE = 'table.tabelas.grid-notas'

# Columns worth showing from the grades table
GRADES_COLUMNS = (0, 2, 4, 6, 8, 10, 21, 22, 23, 24, 25, 26)


class _Target(Enum):

    def __init__(self, label, selector):
        self.label = label
        self.selector = selector


class Module(_Target):
    ALUNO = ('Aluno', 'a[alt="Aluno"]')


class Menu(_Target):
    HOME = ('Home', '#accordion > [role="tab"]:nth-child(1)')
    SERVICOS = ('Serviços', '#accordion > [role="tab"]:nth-child(3)')
    DECLARACOES = ('Declarações', '#accordion > [role="tab"]:nth-child(5)')
    CONSULTAS = ('Consultas e Relatórios', '#accordion > [role="tab"]:nth-child(7)')


class Panel(_Target):
    QUADRO_HORARIO = ('Quadro de Horário', 'h3 > a[href*="quadroHorario"]')
    NOTAS_FREQUENCIA = ('Notas e Frequência', 'h3 > a[href*="notas"]')
    ESPELHO_MATRICULA = ('Espelho Solicitação de Matrícula', 'h3 > a[href*="Espelho"]')
