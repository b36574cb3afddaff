# -*- coding: utf-8 -*-
"""Удалить элементы, построенные командой «Создать домик»."""

__title__ = u'Удалить\nдомик'
__doc__ = u'Удаляет стены, двери, окна, крыши и опорные плоскости с тегом AUTO_HOUSE.'

from pyrevit import forms, revit

import config_loader
import rollback_utils
from utils_revit import alert, get_output, log_exception


doc = revit.doc
output = get_output()

KIND_DISPLAY = {
    'WALL': u'Стены',
    'DOOR': u'Двери',
    'WINDOW': u'Окна',
    'ROOF': u'Крыши',
    'PLANE': u'Опорные плоскости',
}


def main():
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

    prefix = rules.get('comment_tag') or rollback_utils.DEFAULT_TAG_PREFIX

    tools = rollback_utils.get_unique_tools(doc, prefix=prefix)
    if not tools:
        forms.alert(
            u'Не найдено элементов с тегом {0}.\n\n'
            u'Возможно, домик ещё не строился.'.format(prefix),
            title=u'Нет элементов для удаления',
            warn_icon=False
        )
        return

    total_count = sum(count for _, count in tools)
    lines = [u'Будут удалены:']
    for tool, count in tools:
        lines.append(u'  - {0}: {1} шт.'.format(KIND_DISPLAY.get(tool, tool), count))
    lines.append(u'\nВСЕГО: {0}'.format(total_count))

    confirm = forms.alert(
        u'\n'.join(lines),
        title=u'Подтверждение удаления',
        yes=True,
        no=True,
        warn_icon=True
    )
    if not confirm:
        return

    try:
        deleted = rollback_utils.delete_all(doc, prefix=prefix)
    except Exception:
        log_exception(u'Ошибка удаления домика')
        alert(u'Удаление не выполнено, транзакция отменена.\nПодробности в журнале pyRevit.')
        return

    output.print_md(u'# Удаление домика')
    output.print_md(u'**Удалено элементов:** {0} из {1}'.format(deleted, total_count))
    forms.alert(
        u'Удалено {0} элементов.\n\n'
        u'Используйте Ctrl+Z для отмены (до сохранения файла).'.format(deleted),
        title=u'Готово',
        warn_icon=False
    )


main()
