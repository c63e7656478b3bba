"""
Catalog Use Cases

Administrator maintenance of pharmacy products and doctors, and patient
reviews of doctors.
"""

import logging
from dataclasses import dataclass
from typing import Any

from healthplus.core.domain import EntityNotFoundException, ValidationException, find_by_id
from healthplus.domain.actions import AddDoctor, AddProduct, AddReview, UpdateDoctor, UpdateProduct
from healthplus.domain.entities import Doctor, Product, Review

from .base import PortalUseCase, WorkflowResult

logger = logging.getLogger(__name__)


@dataclass
class ProductInput:
    name: str
    price: float
    category: str
    stock: int
    image: str = ""


@dataclass
class DoctorInput:
    name: str
    specialty: str
    fee: float
    rating: float = 0.0


@dataclass
class ReviewInput:
    doctor_id: str
    rating: int
    comment: str = ""
    appointment_id: str | None = None


class AddProductUseCase(PortalUseCase):
    """Use Case: Add a pharmacy product to the catalog."""

    async def execute(self, data: ProductInput) -> WorkflowResult:
        if not data.name:
            raise ValidationException("Product name is required", field="name")
        if data.price < 0:
            raise ValidationException("Price cannot be negative", field="price")
        if data.stock < 0:
            raise ValidationException("Stock cannot be negative", field="stock")

        product = Product(
            id=self.ids.new_id("prod"),
            name=data.name,
            price=data.price,
            category=data.category,
            stock=data.stock,
            image=data.image,
            created_at=self.ids.now(),
        )
        result = self._commit([AddProduct(product=product)], value=product)
        logger.info(f"Product added: {product.id} ({product.name})")
        return result


class UpdateProductUseCase(PortalUseCase):
    async def execute(self, product_id: str, updates: dict[str, Any]) -> WorkflowResult:
        if find_by_id(self.store.snapshot.products, product_id) is None:
            raise EntityNotFoundException("Product", product_id)
        for field_name in ("price", "stock"):
            if field_name in updates and updates[field_name] < 0:
                raise ValidationException(f"{field_name} cannot be negative", field=field_name)

        result = self._commit([UpdateProduct(id=product_id, updates=dict(updates))])
        logger.info(f"Product updated: {product_id}")
        return WorkflowResult(
            actions=result.actions,
            value=find_by_id(result.snapshot.products, product_id),
            snapshot=result.snapshot,
        )


class AddDoctorUseCase(PortalUseCase):
    """Use Case: Add a doctor. New doctors are always bookable."""

    async def execute(self, data: DoctorInput) -> WorkflowResult:
        if not data.name or not data.specialty:
            raise ValidationException("Doctor name and specialty are required", field="name")
        if data.fee < 0:
            raise ValidationException("Fee cannot be negative", field="fee")

        doctor = Doctor(
            id=self.ids.new_id("doc"),
            name=data.name,
            specialty=data.specialty,
            fee=data.fee,
            rating=data.rating,
            available=True,
            joined_at=self.ids.now(),
        )
        result = self._commit([AddDoctor(doctor=doctor)], value=doctor)
        logger.info(f"Doctor added: {doctor.id} ({doctor.name})")
        return result


class UpdateDoctorUseCase(PortalUseCase):
    """Use Case: Update a doctor, including toggling availability."""

    async def execute(self, doctor_id: str, updates: dict[str, Any]) -> WorkflowResult:
        if find_by_id(self.store.snapshot.doctors, doctor_id) is None:
            raise EntityNotFoundException("Doctor", doctor_id)
        if "fee" in updates and updates["fee"] < 0:
            raise ValidationException("Fee cannot be negative", field="fee")

        result = self._commit([UpdateDoctor(id=doctor_id, updates=dict(updates))])
        logger.info(f"Doctor updated: {doctor_id}")
        return WorkflowResult(
            actions=result.actions,
            value=find_by_id(result.snapshot.doctors, doctor_id),
            snapshot=result.snapshot,
        )


class SubmitReviewUseCase(PortalUseCase):
    """Use Case: A logged-in patient rates a doctor from 1 to 5."""

    async def execute(self, data: ReviewInput) -> WorkflowResult:
        user = self._require_user("Review")
        if find_by_id(self.store.snapshot.doctors, data.doctor_id) is None:
            raise EntityNotFoundException("Doctor", data.doctor_id)
        if not 1 <= data.rating <= 5:
            logger.warning(f"Review rejected: rating {data.rating} out of range")
            raise ValidationException("Rating must be between 1 and 5", field="rating")

        review = Review(
            id=self.ids.new_id("review"),
            doctor_id=data.doctor_id,
            patient_id=user.id,
            rating=data.rating,
            comment=data.comment,
            appointment_id=data.appointment_id,
            created_at=self.ids.now(),
        )
        result = self._commit([AddReview(review=review)], value=review)
        logger.info(f"Review {review.id} submitted for {data.doctor_id}")
        return result
