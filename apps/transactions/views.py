import logging

from django.conf import settings
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.db import DatabaseError
from django.http import HttpResponse
from django.shortcuts import render, redirect, get_object_or_404
from django.utils import timezone
from django.views.decorators.http import require_POST

from .forms import TransactionForm
from .models import Transaction
from .utils import filter_transactions, export_transactions_to_excel, export_filename

logger = logging.getLogger(__name__)

# 직전 입력값 (날짜/유형/카테고리/결제수단) 보관 키
FORM_DEFAULTS_SESSION_KEY = 'transaction_form_defaults'


def _initial_form_values(request):
    """새 입력 폼 초기값: 오늘 날짜 + 지출, 직전 입력값이 있으면 덮어씀"""
    initial = {
        'transaction_date': timezone.localdate(),
        'type': Transaction.TYPE_EXPENSE,
    }
    initial.update(request.session.get(FORM_DEFAULTS_SESSION_KEY, {}))
    return initial


def _load_choices(request, form):
    """카테고리/결제 수단 선택지 미리 조회 (실패 시 알림)"""
    try:
        list(form.fields['category'].queryset)
        list(form.fields['payment_mode'].queryset)
        return True
    except DatabaseError as e:
        logger.error(f"기준 정보 조회 실패: {e}", exc_info=True)
        messages.error(request, 'Failed to load categories or payment modes')
        # 화면 렌더링 중 재조회하지 않도록 비움
        form.fields['category'].queryset = form.fields['category'].queryset.none()
        form.fields['payment_mode'].queryset = form.fields['payment_mode'].queryset.none()
        return False


def _render_list(request, form):
    """거래 목록 + 입력 폼 화면"""
    search = request.GET.get('q', '')
    limit = settings.TRANSACTION_LIST_LIMIT

    try:
        transactions = list(Transaction.objects.recent(limit))
    except DatabaseError as e:
        logger.error(f"거래 목록 조회 실패: {e}", exc_info=True)
        messages.error(request, 'Failed to load transactions')
        transactions = []

    choices_loaded = _load_choices(request, form)

    context = {
        'form': form,
        'choices_loaded': choices_loaded,
        'transactions': filter_transactions(transactions, search),
        'fetched_count': len(transactions),
        'search': search,
        'limit': limit,
    }
    return render(request, 'transactions/transaction_list.html', context)


@login_required
def transaction_list(request):
    """거래 목록 (최근 N건) + 새 거래 입력 폼"""
    form = TransactionForm(initial=_initial_form_values(request))
    return _render_list(request, form)


@login_required
@require_POST
def transaction_create(request):
    """거래 생성"""
    form = TransactionForm(request.POST)
    if not form.is_valid():
        messages.error(request, form.first_error())
        return _render_list(request, form)

    try:
        transaction = form.save()
    except DatabaseError as e:
        logger.error(f"거래 등록 실패: {e}", exc_info=True)
        messages.error(request, str(e) or 'Failed to add transaction')
        return _render_list(request, form)

    logger.info(f"거래 등록: {transaction} (ID: {transaction.pk}, 사용자: {request.user.username})")
    # 금액/설명은 비우고 나머지는 다음 입력에 유지
    request.session[FORM_DEFAULTS_SESSION_KEY] = form.get_defaults()
    messages.success(request, 'Transaction added successfully')
    return redirect('transactions:transaction_list')


@login_required
def transaction_delete(request, pk):
    """거래 삭제 (확인 후 영구 삭제)"""
    transaction = get_object_or_404(Transaction.objects.with_relations(), pk=pk)

    if request.method == 'POST':
        try:
            transaction.delete()
        except DatabaseError as e:
            logger.error(f"거래 삭제 실패 (ID: {pk}): {e}", exc_info=True)
            messages.error(request, 'Failed to delete transaction')
            return redirect('transactions:transaction_list')

        logger.info(f"거래 삭제: ID {pk} (사용자: {request.user.username})")
        messages.success(request, 'Transaction deleted')
        return redirect('transactions:transaction_list')

    return render(request, 'transactions/transaction_confirm_delete.html', {'transaction': transaction})


@login_required
def transaction_export_view(request):
    """거래 내역 엑셀 다운로드 (검색어 적용)"""
    try:
        transactions = Transaction.objects.with_relations().latest_first()
        transactions = filter_transactions(transactions, request.GET.get('q', ''))
        excel_file = export_transactions_to_excel(transactions)
    except DatabaseError as e:
        logger.error(f"거래 내역 내보내기 실패: {e}", exc_info=True)
        messages.error(request, 'Failed to export transactions')
        return redirect('transactions:transaction_list')

    response = HttpResponse(
        excel_file.read(),
        content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )
    response['Content-Disposition'] = f'attachment; filename="{export_filename()}"'
    return response
