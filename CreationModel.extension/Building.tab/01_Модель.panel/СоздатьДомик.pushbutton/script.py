# -*- coding: utf-8 -*-
"""Построить домик: 4 стены, дверь, 3 окна и двускатную крышу."""

__title__ = u'Создать\nдомик'
__doc__ = u'Строит однокомнатный домик между уровнями из config/rules.default.json.'

from pyrevit import revit

import config_loader
import house_builder
from utils_revit import alert, get_logger, get_output, log_exception


doc = revit.doc
output = get_output()
logger = get_logger()


def main():
    output.print_md(u'# Создание домика')

    if doc is None:
        alert(u'Нет активного документа.')
        return

    if getattr(doc, 'IsFamilyDocument', False):
        alert(u'Это семейство. Откройте проект.')
        return

    try:
        rules = config_loader.load_rules()
    except (IOError, OSError, ValueError):
        log_exception(u'Не удалось прочитать правила')
        alert(u'Не удалось прочитать config/rules.default.json.\nПодробности в журнале pyRevit.')
        return

    try:
        result = house_builder.build_house(doc, rules)
    except house_builder.MissingElementError as ex:
        output.print_md(u'**Построение отменено**, документ не изменён.')
        for kind, name in ex.missing:
            output.print_md(u'- {0}: `{1}`'.format(kind, name))
        alert(u'{0}\n\nЗагрузите недостающие семейства или переименуйте уровни.'.format(ex))
        return
    except house_builder.ConfigurationError as ex:
        alert(u'Ошибка в правилах: {0}'.format(ex))
        return
    except Exception:
        log_exception(u'Ошибка построения домика')
        alert(u'Построение не выполнено, транзакция отменена.\nПодробности в журнале pyRevit.')
        return

    output.print_md(u'---')
    for line in house_builder.format_report(result):
        output.print_md(line)
    logger.debug(u'House command finished')


main()
