"""Pydantic request bodies for the portal API."""

import datetime as dt

from pydantic import BaseModel, Field

from healthplus.domain.value_objects import OrderStatus, PaymentMethod


# Auth


class LoginBody(BaseModel):
    email: str = Field(..., min_length=1, description="Account email")
    password: str = Field(default="", description="Ignored by the mock backend")
    name: str = Field(default="", description="Display name for patients")
    mobile: str = Field(default="", description="Mobile number")


class RegisterBody(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    mobile: str = Field(default="")


class VerifyOtpBody(BaseModel):
    otp: str = Field(..., min_length=6, max_length=6, description="Six digit one-time code")


class ProfileUpdateBody(BaseModel):
    """Partial profile update; id and role cannot be changed."""

    name: str | None = None
    email: str | None = None
    mobile: str | None = None


# Appointments and teleconsultation


class BookAppointmentBody(BaseModel):
    doctor_id: str = Field(default="", description="Doctor to book")
    date: dt.date | None = Field(default=None, description="Consultation day")
    time_slot: str = Field(default="", description="One of the bookable slots, e.g. 10:00")


class ChatMessageBody(BaseModel):
    text: str = Field(..., description="Message from the patient")


class ReviewBody(BaseModel):
    doctor_id: str
    rating: int = Field(..., description="1 to 5")
    comment: str = ""
    appointment_id: str | None = None


# Pharmacy


class CartItemBody(BaseModel):
    product_id: str
    quantity: int = Field(default=1, description="Units to add")


class CheckoutBody(BaseModel):
    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    pincode: str = Field(..., min_length=1)
    payment_method: PaymentMethod = PaymentMethod.UPI


class OrderStatusBody(BaseModel):
    status: OrderStatus


# Admin catalog


class ProductCreateBody(BaseModel):
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    category: str = Field(default="general")
    stock: int = Field(..., ge=0)
    image: str = ""


class ProductUpdateBody(BaseModel):
    name: str | None = None
    price: float | None = Field(None, ge=0)
    category: str | None = None
    stock: int | None = Field(None, ge=0)
    image: str | None = None


class DoctorCreateBody(BaseModel):
    name: str = Field(..., min_length=1)
    specialty: str = Field(..., min_length=1)
    fee: float = Field(..., ge=0)
    rating: float = Field(default=0.0, ge=0, le=5)


class DoctorUpdateBody(BaseModel):
    name: str | None = None
    specialty: str | None = None
    fee: float | None = Field(None, ge=0)
    rating: float | None = Field(None, ge=0, le=5)
    available: bool | None = None
