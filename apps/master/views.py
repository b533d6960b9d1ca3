import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.db import DatabaseError
from django.db.models import ProtectedError
from django.shortcuts import render, redirect, get_object_or_404

from .forms import CategoryForm, PaymentModeForm
from .models import Category, PaymentMode

logger = logging.getLogger(__name__)

# ============================================================
# Category
# ============================================================

@login_required
def category_list(request):
    """카테고리 목록 (사용 건수 포함)"""
    categories = Category.objects.with_usage().order_by('name')
    return render(request, 'master/category_list.html', {
        'categories': categories,
    })


@login_required
def category_create(request):
    """카테고리 생성"""
    if request.method == 'POST':
        form = CategoryForm(request.POST)
        if form.is_valid():
            category = form.save()
            logger.info(f"카테고리 생성: {category.name} (ID: {category.pk})")
            messages.success(request, f"'{category.name}' category created")
            return redirect('master:category_list')
    else:
        form = CategoryForm()

    return render(request, 'master/master_form.html', {
        'form': form,
        'title': 'Add Category',
        'cancel_url': 'master:category_list',
    })


@login_required
def category_update(request, pk):
    """카테고리 수정"""
    category = get_object_or_404(Category, pk=pk)

    if request.method == 'POST':
        form = CategoryForm(request.POST, instance=category)
        if form.is_valid():
            form.save()
            messages.success(request, f"'{category.name}' category updated")
            return redirect('master:category_list')
    else:
        form = CategoryForm(instance=category)

    return render(request, 'master/master_form.html', {
        'form': form,
        'object': category,
        'title': 'Edit Category',
        'cancel_url': 'master:category_list',
    })


@login_required
def category_delete(request, pk):
    """카테고리 삭제 (사용 중이면 거부)"""
    category = get_object_or_404(Category, pk=pk)

    # 사용 중인지 체크
    transaction_count = category.transactions.count()
    if transaction_count > 0:
        messages.error(request, f'Cannot delete a category that is in use ({transaction_count} transactions)')
        return redirect('master:category_list')

    if request.method == 'POST':
        category_name = category.name
        try:
            category.delete()
        except (ProtectedError, DatabaseError) as e:
            logger.error(f"카테고리 삭제 실패: {e}", exc_info=True)
            messages.error(request, 'Failed to delete category')
            return redirect('master:category_list')
        messages.success(request, f"'{category_name}' category deleted")
        return redirect('master:category_list')

    return render(request, 'master/master_confirm_delete.html', {
        'object': category,
        'kind': 'category',
        'cancel_url': 'master:category_list',
    })


# ============================================================
# Payment Mode
# ============================================================

@login_required
def payment_mode_list(request):
    """결제 수단 목록 (사용 건수 포함)"""
    payment_modes = PaymentMode.objects.with_usage().order_by('mode')
    return render(request, 'master/payment_mode_list.html', {
        'payment_modes': payment_modes,
    })


@login_required
def payment_mode_create(request):
    """결제 수단 생성"""
    if request.method == 'POST':
        form = PaymentModeForm(request.POST)
        if form.is_valid():
            payment_mode = form.save()
            logger.info(f"결제 수단 생성: {payment_mode.mode} (ID: {payment_mode.pk})")
            messages.success(request, f"'{payment_mode.mode}' payment mode created")
            return redirect('master:payment_mode_list')
    else:
        form = PaymentModeForm()

    return render(request, 'master/master_form.html', {
        'form': form,
        'title': 'Add Payment Mode',
        'cancel_url': 'master:payment_mode_list',
    })


@login_required
def payment_mode_update(request, pk):
    """결제 수단 수정"""
    payment_mode = get_object_or_404(PaymentMode, pk=pk)

    if request.method == 'POST':
        form = PaymentModeForm(request.POST, instance=payment_mode)
        if form.is_valid():
            form.save()
            messages.success(request, f"'{payment_mode.mode}' payment mode updated")
            return redirect('master:payment_mode_list')
    else:
        form = PaymentModeForm(instance=payment_mode)

    return render(request, 'master/master_form.html', {
        'form': form,
        'object': payment_mode,
        'title': 'Edit Payment Mode',
        'cancel_url': 'master:payment_mode_list',
    })


@login_required
def payment_mode_delete(request, pk):
    """결제 수단 삭제 (사용 중이면 거부)"""
    payment_mode = get_object_or_404(PaymentMode, pk=pk)

    transaction_count = payment_mode.transactions.count()
    if transaction_count > 0:
        messages.error(request, f'Cannot delete a payment mode that is in use ({transaction_count} transactions)')
        return redirect('master:payment_mode_list')

    if request.method == 'POST':
        mode_name = payment_mode.mode
        try:
            payment_mode.delete()
        except (ProtectedError, DatabaseError) as e:
            logger.error(f"결제 수단 삭제 실패: {e}", exc_info=True)
            messages.error(request, 'Failed to delete payment mode')
            return redirect('master:payment_mode_list')
        messages.success(request, f"'{mode_name}' payment mode deleted")
        return redirect('master:payment_mode_list')

    return render(request, 'master/master_confirm_delete.html', {
        'object': payment_mode,
        'kind': 'payment mode',
        'cancel_url': 'master:payment_mode_list',
    })
