import openpyxl
from io import BytesIO

from django.utils import timezone


def filter_transactions(transactions, search_term):
    """
    이미 가져온 거래 목록을 설명/카테고리명으로 걸러냄

    - 대소문자 무시 부분 문자열 검색
    - 설명이나 카테고리가 없으면 빈 문자열로 취급
    - 검색어가 비어 있으면 전체 반환
    """
    term = (search_term or '').lower()
    if not term:
        return list(transactions)

    matched = []
    for tx in transactions:
        description = (tx.description or '').lower()
        category_name = (tx.category.name if tx.category_id else '').lower()
        if term in description or term in category_name:
            matched.append(tx)
    return matched


EXPORT_HEADERS = ['Date', 'Type', 'Category', 'Payment Mode', 'Description', 'Amount']


def export_transactions_to_excel(transactions):
    """
    거래 내역을 6열 엑셀로 내보내기
    금액은 부호 포함 (수입 +, 지출 -)
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Transactions"

    ws.append(EXPORT_HEADERS)

    for tx in transactions:
        amount = float(tx.amount) if tx.amount else 0
        row = [
            tx.transaction_date.strftime('%Y-%m-%d') if tx.transaction_date else '',
            tx.get_type_display(),
            tx.category.name if tx.category_id else '',
            tx.payment_mode.mode if tx.payment_mode_id else '',
            tx.description or '',
            amount if tx.is_income else -amount,
        ]
        ws.append(row)

    output = BytesIO()
    wb.save(output)
    output.seek(0)
    return output


def export_filename(now=None):
    """transactions_YYYYmmdd_HHMMSS.xlsx"""
    now = now or timezone.localtime()
    return f"transactions_{now.strftime('%Y%m%d_%H%M%S')}.xlsx"
